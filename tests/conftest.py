import pytest
from fastapi.testclient import TestClient

from social_blog_api.app.core.config import Settings
from social_blog_api.app.core.db import ConnectionProvider, init_db
from social_blog_api.app.main import create_app
from social_blog_api.app.repositories import AccountRepository, MessageRepository
from social_blog_api.app.services import AccountService, MessageService


@pytest.fixture
def provider(tmp_path):
    provider = ConnectionProvider(str(tmp_path / "test.db"))
    init_db(provider)
    return provider


@pytest.fixture
def account_repository(provider):
    return AccountRepository(provider)


@pytest.fixture
def message_repository(provider):
    return MessageRepository(provider)


@pytest.fixture
def account_service(account_repository):
    return AccountService(account_repository)


@pytest.fixture
def message_service(message_repository, account_repository):
    return MessageService(message_repository, account_repository)


@pytest.fixture
def client(tmp_path):
    provider = ConnectionProvider(str(tmp_path / "api.db"))
    app = create_app(Settings(), provider=provider)
    # Entering the client runs the lifespan, which applies migrations.
    with TestClient(app) as test_client:
        yield test_client
