"""
Pydantic schema definitions for API payloads.

Each entity (accounts, messages) defines its own Pydantic models for
request and response bodies.  Schemas only check shape and types;
business rules such as length limits live in the service layer.
"""
