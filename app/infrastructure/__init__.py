"""Infrastructure: SQLAlchemy persistence and infrastructure services."""
