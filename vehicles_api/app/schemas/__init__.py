"""
Pydantic schema definitions for API payloads.

Schemas describe request bodies, stored records and the
``{"message", "data"}`` response envelope.
"""
