"""
minishop: a small e-commerce backend.

Members register and look themselves up, items are stocked under
caller-assigned identifiers, and orders tie a member, a delivery and order
lines together. Persistence goes through SQLModel/SQLAlchemy entities with
auditing listeners; the HTTP surface is a FastAPI application.
"""

__version__ = "0.1.0"
