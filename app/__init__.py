"""EventHub: organizations, events and tickets over a FastAPI + SQLAlchemy service."""
