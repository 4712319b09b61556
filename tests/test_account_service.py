import pytest

from social_blog_api.app.schemas.account import AccountCredentials
from social_blog_api.app.services.result import ResultStatus


def _creds(username="bob", password="pass1"):
    return AccountCredentials(username=username, password=password)


def test_register_returns_account_with_id(account_service):
    result = account_service.register(_creds())
    assert result.ok
    assert result.value.account_id > 0
    assert result.value.username == "bob"
    assert result.value.password == "pass1"


@pytest.mark.parametrize("username", ["", "   "])
def test_register_rejects_blank_username(account_service, username):
    result = account_service.register(_creds(username=username))
    assert result.status is ResultStatus.INVALID


@pytest.mark.parametrize("password", ["", "a", "abc"])
def test_register_rejects_short_password(account_service, password):
    result = account_service.register(_creds(password=password))
    assert result.status is ResultStatus.INVALID


def test_register_accepts_four_character_password(account_service):
    assert account_service.register(_creds(password="abcd")).ok


def test_register_rejects_missing_candidate(account_service):
    assert account_service.register(None).status is ResultStatus.INVALID


def test_register_rejects_duplicate_pair(account_service):
    assert account_service.register(_creds()).ok
    second = account_service.register(_creds())
    assert second.status is ResultStatus.INVALID
    assert len(account_service.get_all()) == 1


def test_same_username_with_other_password_is_allowed(account_service):
    assert account_service.register(_creds()).ok
    assert account_service.register(_creds(password="other")).ok


def test_authenticate(account_service):
    created = account_service.register(_creds()).value

    assert account_service.authenticate(_creds()).value == created
    assert account_service.authenticate(_creds(password="wrong")).status is ResultStatus.INVALID
    assert account_service.authenticate(_creds(username="BOB")).status is ResultStatus.INVALID
    assert account_service.authenticate(None).status is ResultStatus.INVALID


def test_get_by_id_and_get_all(account_service):
    assert account_service.get_all() == []
    created = account_service.register(_creds()).value

    assert account_service.get_by_id(created.account_id).value == created
    assert account_service.get_by_id(created.account_id + 1).status is ResultStatus.NOT_FOUND
    assert account_service.get_by_id(0).status is ResultStatus.NOT_FOUND
    assert account_service.get_all() == [created]
