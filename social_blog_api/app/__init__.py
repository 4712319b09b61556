"""
Application package initializer.

The project is organised into layers: ``api`` binds HTTP routes,
``services`` holds validation and business rules, ``repositories``
runs the SQL and ``core`` carries the shared plumbing (settings,
logging, database connections and errors).
"""

from .main import app  # noqa: F401
