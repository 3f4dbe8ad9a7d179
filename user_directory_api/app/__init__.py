"""
Application package.

Contains the FastAPI entrypoint (``main``), configuration and error
handling (``core``), request/response schemas (``schemas``), business
logic (``services``) and the HTTP routes (``api``).
"""

from .main import app, create_app  # noqa: F401
