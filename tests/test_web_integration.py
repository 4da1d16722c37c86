"""
Web integration tests for the widget HTTP surface.
"""
import pytest

from app.main import create_app, parse_args
from config_manager import ConfigManager
from trending_service.errors import FetchError, ParseError


@pytest.fixture
def config(tmp_path, clean_env):
    """Configuration with defaults only."""
    return ConfigManager(str(tmp_path / "widget_config.json"))


def _client(config, fetcher):
    app = create_app(config, fetcher=fetcher)
    app.config["TESTING"] = True
    return app.test_client()


class TestWidgetEndpoint:
    """Test the widget endpoint through Flask's test client."""

    def test_root_serves_fragment(self, config, stub_fetcher_cls, make_card, make_page):
        client = _client(config, stub_fetcher_cls(make_page(make_card())))

        response = client.get("/")

        assert response.status_code == 200
        assert response.content_type == "text/html; charset=utf-8"
        assert response.headers["Widget-Content-Type"] == "html"
        assert response.headers["Cache-Control"] == "no-cache, no-store, must-revalidate"
        assert response.headers["Pragma"] == "no-cache"
        assert response.headers["Expires"] == "0"

        body = response.get_data(as_text=True)
        assert "<style>" in body
        assert body.count('<li class="list-item">') == 1
        assert 'href="https://github.com/octo/repo"' in body

    @pytest.mark.parametrize("method,path", [
        ("get", "/anything"),
        ("get", "/deeply/nested/path"),
        ("post", "/"),
        ("put", "/widget"),
        ("delete", "/"),
    ])
    def test_method_and_path_are_ignored(self, config, stub_fetcher_cls, make_card, make_page, method, path):
        client = _client(config, stub_fetcher_cls(make_page(make_card())))

        response = getattr(client, method)(path)

        assert response.status_code == 200
        assert ">octo/repo</a>" in response.get_data(as_text=True)

    def test_fetch_failure(self, config, stub_fetcher_cls):
        client = _client(config, stub_fetcher_cls(error=FetchError("status code 502", status_code=502)))

        response = client.get("/")

        assert response.status_code == 500
        assert response.get_data(as_text=True) == "Error fetching data\n"
        assert response.headers["Widget-Content-Type"] == "html"

    def test_parse_failure(self, config, stub_fetcher_cls):
        client = _client(config, stub_fetcher_cls(error=ParseError("bad markup")))

        response = client.get("/")

        assert response.status_code == 500
        assert response.get_data(as_text=True) == "Error parsing data\n"

    def test_styles_and_cache_headers_follow_config(self, tmp_path, clean_env, stub_fetcher_cls, make_page):
        clean_env.setenv("WIDGET_INCLUDE_STYLES", "false")
        clean_env.setenv("WIDGET_DISABLE_CACHING", "false")
        config = ConfigManager(str(tmp_path / "widget_config.json"))
        client = _client(config, stub_fetcher_cls(make_page()))

        response = client.get("/")

        assert response.get_data(as_text=True) == '<ul class="list gh-trending-list"></ul>'
        assert "Cache-Control" not in response.headers
        assert "Pragma" not in response.headers
        assert response.headers["Widget-Content-Type"] == "html"

    def test_health_endpoint(self, config, stub_fetcher_cls):
        fetcher = stub_fetcher_cls()
        client = _client(config, fetcher)

        response = client.get("/actuator/health")

        assert response.status_code == 200
        assert response.get_json()["status"] == "UP"
        assert fetcher.calls == 0

    def test_default_fetcher_uses_source_config(self, tmp_path, clean_env):
        clean_env.setenv("TRENDING_SOURCE_URL", "https://example.test/trending")
        clean_env.setenv("TRENDING_TIMEOUT", "2.5")
        app = create_app(ConfigManager(str(tmp_path / "widget_config.json")))

        fetcher = app.extensions["widget_module"]["service"].fetcher

        assert fetcher.url == "https://example.test/trending"
        assert fetcher.timeout == 2.5


class TestCommandLine:
    """Test command line parsing for the server entry point."""

    def test_defaults(self):
        args = parse_args([])

        assert args.port is None
        assert args.host is None
        assert args.debug is False
        assert args.config == "widget_config.json"

    def test_overrides(self):
        args = parse_args(["--port", "9000", "--host", "127.0.0.1", "--debug"])

        assert args.port == 9000
        assert args.host == "127.0.0.1"
        assert args.debug is True
