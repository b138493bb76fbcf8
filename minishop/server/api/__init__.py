"""FastAPI routers, grouped by API version."""
