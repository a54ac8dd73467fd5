"""
Thingful - things and their reviews.

    from thingful import create_app
    app = create_app()
"""

__version__ = "0.1.0"


def create_app(*args, **kwargs):
    """Create the FastAPI application (see thingful.api.main.create_app)."""
    from .api.main import create_app as _create_app

    return _create_app(*args, **kwargs)


__all__ = ["create_app", "__version__"]
