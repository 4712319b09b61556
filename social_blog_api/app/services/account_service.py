"""
Business logic for accounts.

Registration rules: the username must not be blank, the password
must be at least ``MIN_PASSWORD_LENGTH`` characters, and the
username/password pair must not already exist.  Passwords are stored
and compared as plain text.
"""

import logging
from typing import List, Optional

from social_blog_api.app.repositories.account_repository import AccountRepository
from social_blog_api.app.schemas.account import AccountCredentials, AccountRead
from social_blog_api.app.services.result import ServiceResult

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 4


class AccountService:
    """Registration, login and account lookups."""

    def __init__(self, accounts: AccountRepository) -> None:
        self._accounts = accounts

    def register(self, candidate: Optional[AccountCredentials]) -> ServiceResult[AccountRead]:
        """Create a new account after validating it.

        Returns an ``INVALID`` result when the candidate is missing,
        the username is blank, the password is too short, or the same
        username/password pair is already registered.
        """
        logger.info("Received request to create a new account")
        if candidate is None:
            logger.warning("Account creation failed: no account supplied")
            return ServiceResult.invalid("account is missing")
        if not candidate.username.strip():
            logger.warning("Account creation failed: username is blank")
            return ServiceResult.invalid("username is blank")
        if len(candidate.password) < MIN_PASSWORD_LENGTH:
            logger.warning(
                "Account creation failed: password shorter than %s characters", MIN_PASSWORD_LENGTH
            )
            return ServiceResult.invalid("password is too short")
        if self._accounts.get_by_credentials(candidate) is not None:
            logger.warning("Account creation failed: %s is already registered", candidate.username)
            return ServiceResult.invalid("account already exists")

        account = self._accounts.insert(candidate)
        logger.info("Created account %s for %s", account.account_id, account.username)
        return ServiceResult.success(account)

    def authenticate(self, candidate: Optional[AccountCredentials]) -> ServiceResult[AccountRead]:
        """Return the stored account matching username and password."""
        logger.info("Received request to authenticate an account")
        if candidate is None:
            logger.warning("Authentication failed: no credentials supplied")
            return ServiceResult.invalid("credentials are missing")
        account = self._accounts.get_by_credentials(candidate)
        if account is None:
            logger.warning("Authentication failed for %s", candidate.username)
            return ServiceResult.invalid("invalid username or password")
        logger.info("Authenticated account %s", account.account_id)
        return ServiceResult.success(account)

    def get_by_id(self, account_id: int) -> ServiceResult[AccountRead]:
        account = self._accounts.get_by_id(account_id)
        if account is None:
            logger.warning("No account found with id %s", account_id)
            return ServiceResult.not_found(f"account {account_id} not found")
        return ServiceResult.success(account)

    def get_all(self) -> List[AccountRead]:
        return self._accounts.get_all()
