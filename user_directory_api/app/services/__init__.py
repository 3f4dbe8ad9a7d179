"""
Service layer abstraction.

Services encapsulate the business logic for a domain.  API handlers
only translate between HTTP and service calls, so the in-memory
storage used here could be swapped for a database without touching
them.
"""
