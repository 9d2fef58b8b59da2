"""FastAPI REST API for cut optimization.

Usage:
    uvicorn cutstock.web:app --port 5000
"""

from cutstock.web.app import app, create_app

__all__ = ["app", "create_app"]
