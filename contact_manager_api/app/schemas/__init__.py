"""
Pydantic schema definitions for API payloads.

Schemas are separated from the SQL in ``repositories`` to decouple the
API representation from persistence.
"""
