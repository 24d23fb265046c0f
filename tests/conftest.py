import pytest
from django.contrib.auth.models import AnonymousUser
from django.contrib.sessions.middleware import SessionMiddleware
from django.core.cache import cache


@pytest.fixture(autouse=True)
def isolated_environment(settings):
    settings.RATELIMIT_ENABLE = False
    settings.SIGNUP_ERROR_DETAIL = True
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def password():
    from tests.factories import DEFAULT_PASSWORD
    return DEFAULT_PASSWORD


@pytest.fixture
def user(db):
    from tests.factories import UserFactory
    return UserFactory(name="Test User", email="test@example.com")


@pytest.fixture
def authenticated_client(client, user):
    client.force_login(user)
    return client


@pytest.fixture
def session_request(rf):
    """A POST request carrying a live session and an anonymous user."""
    request = rf.post("/login/")
    SessionMiddleware(lambda r: None).process_request(request)
    request.session.save()
    request.user = AnonymousUser()
    return request
