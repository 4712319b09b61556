"""
Shared building blocks: settings, logging, database wiring and errors.

Keep entity-specific SQL in ``repositories`` and business rules in
``services``.
"""
