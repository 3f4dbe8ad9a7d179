"""
Top-level package for the User Directory API.

The package provides no public exports; the application lives in
``user_directory_api.app``.
"""

__all__ = []
