"""FastAPI REST API for the vehicle configurator.

This module provides a REST API for validating configurations, browsing the
option catalog and rule set, and driving a configurator session.

Usage:
    uvicorn configurator.web:app --reload
"""

from configurator.web.app import app, create_app

__all__ = ["app", "create_app"]
