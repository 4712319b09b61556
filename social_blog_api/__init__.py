"""
Social Blog API: accounts and short text messages over HTTP.

The ASGI application lives in ``social_blog_api.app.main``; run it
with ``python run.py`` or ``uvicorn social_blog_api.app.main:app``.
"""

__all__ = []
