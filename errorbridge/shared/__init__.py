"""
Shared module package.

Contains cross-cutting concerns:
- FastAPI error handler registration
- Logging configuration
"""
