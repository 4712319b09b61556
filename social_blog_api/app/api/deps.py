"""
FastAPI dependencies wiring services to the app's connection provider.

Services and repositories are cheap, stateless objects, so a fresh
set is built for every request around the single provider stored on
``app.state``.
"""

from typing import Annotated

from fastapi import Depends, Path, Request

from social_blog_api.app.core.db import SQLITE_INTEGER_MAX, SQLITE_INTEGER_MIN, ConnectionProvider
from social_blog_api.app.repositories.account_repository import AccountRepository
from social_blog_api.app.repositories.message_repository import MessageRepository
from social_blog_api.app.services.account_service import AccountService
from social_blog_api.app.services.message_service import MessageService


# Path ids outside the SQLite INTEGER range fail validation (400).
RowId = Annotated[int, Path(ge=SQLITE_INTEGER_MIN, le=SQLITE_INTEGER_MAX)]


def get_provider(request: Request) -> ConnectionProvider:
    return request.app.state.connection_provider


def get_account_service(provider: ConnectionProvider = Depends(get_provider)) -> AccountService:
    return AccountService(AccountRepository(provider))


def get_message_service(provider: ConnectionProvider = Depends(get_provider)) -> MessageService:
    return MessageService(MessageRepository(provider), AccountRepository(provider))
