"""Persistence: async engine/session, ORM models and repositories."""
