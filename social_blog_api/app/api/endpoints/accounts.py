"""
Account endpoints.

Registration, login, the account listing and the per-author message
listing.  Rejected registrations answer 400 and rejected logins 401,
both with an empty body.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from social_blog_api.app.api.deps import RowId, get_account_service, get_message_service
from social_blog_api.app.schemas.account import AccountCredentials, AccountRead
from social_blog_api.app.schemas.message import MessageRead
from social_blog_api.app.services.account_service import AccountService
from social_blog_api.app.services.message_service import MessageService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=AccountRead)
def register(
    account: AccountCredentials,
    service: AccountService = Depends(get_account_service),
) -> AccountRead:
    """Register a new account and return it with its generated id."""
    result = service.register(account)
    if not result.ok:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.reason)
    logger.info("Registered user %s with id %s", result.value.username, result.value.account_id)
    return result.value


@router.post("/login", response_model=AccountRead)
def login(
    account: AccountCredentials,
    service: AccountService = Depends(get_account_service),
) -> AccountRead:
    result = service.authenticate(account)
    if not result.ok:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=result.reason)
    return result.value


@router.get("/accounts", response_model=List[AccountRead])
def list_accounts(service: AccountService = Depends(get_account_service)) -> List[AccountRead]:
    return service.get_all()


@router.get("/accounts/{account_id}/messages", response_model=List[MessageRead])
def list_account_messages(
    account_id: RowId,
    service: MessageService = Depends(get_message_service),
) -> List[MessageRead]:
    """List every message posted by an account (empty if none or unknown)."""
    return service.get_all_by_author(account_id)
