import pytest


@pytest.fixture
def static_dir(tmp_path):
    """Frontend directory with a single index page."""
    public = tmp_path / "public"
    public.mkdir()
    (public / "index.html").write_text("<html><body>DINX frontend</body></html>")
    return public


@pytest.fixture
def config(static_dir):
    """Config with fake credentials for both providers."""
    from config import Config
    return Config(
        groq_api_key="test-groq-key",
        tavily_api_key="test-tavily-key",
        static_dir=static_dir
    )


@pytest.fixture
def provider():
    """Scripted search and LLM providers."""
    from tests.fixtures.mock_clients import ProviderStub
    return ProviderStub()


@pytest.fixture
def http_client(provider):
    return provider.build()


@pytest.fixture
def search_service(config, http_client):
    from services.search import SearchService
    return SearchService(config, http_client)


@pytest.fixture
def chat_service(config, http_client, search_service):
    from services.chat_service import ChatService
    return ChatService(config, http_client, search_service)


@pytest.fixture
def app_factory(http_client):
    """Build a TestClient around the app for a given config."""
    from fastapi.testclient import TestClient
    from main import create_app

    def _build(app_config):
        return TestClient(create_app(app_config, http_client))

    return _build


@pytest.fixture
def configured_app(app_factory, config):
    """Pre-configured app with both provider keys set and scripted providers."""
    with app_factory(config) as client:
        yield client
