"""
Pydantic schema definitions for API payloads.

Schemas are separated from the store records so that the API
representation is decoupled from how users are held in memory.
"""
