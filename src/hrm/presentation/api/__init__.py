"""REST API presentation layer for HRM.

This package provides a FastAPI-based REST API over the identity layer.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Domain error to HTTP mapping
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from hrm.presentation.api.app import create_app

__all__ = ["create_app"]
