"""
Pydantic models for account data.

The read model echoes the password back because clients of this API
expect the full account row on register and login.
"""

from pydantic import BaseModel, Field


class AccountCredentials(BaseModel):
    """Body of ``POST /register`` and ``POST /login``."""

    username: str = Field(..., examples=["bob"])
    password: str = Field(..., examples=["pass1"])


class AccountRead(AccountCredentials):
    """Schema for reading an account from the API."""

    account_id: int

    model_config = {
        "from_attributes": True,
    }
