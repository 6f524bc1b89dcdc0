"""Persistence: async SQLAlchemy models, repositories and unit of work."""
