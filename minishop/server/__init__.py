"""
minishop Server Package.

This package contains the web server implementation for minishop.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Configuration and constants.
    services: Business logic and transaction boundaries.
    exception_handlers: Error-to-HTTP translation.
    middleware: Request logging and auditor binding.
"""
