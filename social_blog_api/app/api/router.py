"""
Top‑level router.

Aggregates the entity routers.  Paths are mounted at the root
(``/register``, ``/messages``...) because existing clients call them
without a version prefix.
"""

from fastapi import APIRouter

from .endpoints import accounts, messages

router = APIRouter()

router.include_router(accounts.router, tags=["accounts"])
router.include_router(messages.router, prefix="/messages", tags=["messages"])
