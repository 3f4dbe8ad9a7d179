"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the services so that the API
representation stays decoupled from how records are stored.
"""
