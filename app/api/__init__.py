"""HTTP API layer (FastAPI routers)."""
