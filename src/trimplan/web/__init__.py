"""FastAPI REST API for cutting plans.

This module provides a REST API for computing baseboard cutting plans and
validating configurations.

Usage:
    uvicorn trimplan.web:app --reload
"""

from trimplan.web.app import app, create_app

__all__ = ["app", "create_app"]
