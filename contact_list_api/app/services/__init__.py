"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  The contact
service works on an in‑memory store; swapping it for a database
would not change the API handlers.
"""
