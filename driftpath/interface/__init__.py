"""Mini README: Interactive interfaces for Driftpath.

Exports the FastAPI application factory consumed by map and 3D front-ends.
"""

from .web_app import create_application

__all__ = ["create_application"]
