"""Configuration tests."""

import json
import logging
import os

import pytest
from routy_core.utils.config import RouterConfig, configure_logging, load_config
from routy_core.utils.helpers import normalize_base_url, request_path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove router settings from the environment."""
    for key in list(os.environ):
        if key.startswith("ROUTY_"):
            monkeypatch.delenv(key)


class TestRouterConfig:
    """Test RouterConfig loading."""

    def test_defaults(self):
        """Test default values."""
        config = RouterConfig()
        assert config.context == ""
        assert config.method_override_field == "_method"
        assert config.log_level == "INFO"

    def test_from_dict_ignores_unknown_keys(self):
        """Test unknown keys are filtered."""
        config = RouterConfig.from_dict({"context": "blog", "port": 8080})
        assert config.context == "blog"

    def test_from_yaml(self, tmp_path):
        """Test YAML config files."""
        path = tmp_path / "routy.yaml"
        path.write_text("context: admin\nbase_url: http://site.com\n")
        config = RouterConfig.from_yaml(str(path))
        assert config.context == "admin"
        assert config.base_url == "http://site.com"

    def test_from_json(self, tmp_path):
        """Test JSON config files."""
        path = tmp_path / "routy.json"
        path.write_text(json.dumps({"log_level": "DEBUG"}))
        assert RouterConfig.from_json(str(path)).log_level == "DEBUG"

    def test_from_env(self, monkeypatch):
        """Test environment variables with prefix."""
        monkeypatch.setenv("ROUTY_CONTEXT", "shop")
        monkeypatch.setenv("ROUTY_METHOD_OVERRIDE_FIELD", "verb")
        config = RouterConfig.from_env()
        assert config.context == "shop"
        assert config.method_override_field == "verb"

    def test_load_config_env_overrides_file(self, tmp_path, monkeypatch):
        """Test environment takes precedence over the file."""
        path = tmp_path / "routy.yml"
        path.write_text("context: admin\nlog_level: WARNING\n")
        monkeypatch.setenv("ROUTY_CONTEXT", "shop")

        config = load_config(str(path))
        assert config.context == "shop"
        assert config.log_level == "WARNING"

    def test_load_config_unknown_format(self, tmp_path, caplog):
        """Test unknown file formats fall back to defaults."""
        path = tmp_path / "routy.ini"
        path.write_text("context=admin\n")
        with caplog.at_level(logging.WARNING):
            config = load_config(str(path))
        assert config.context == ""
        assert any("Unknown config format" in r.message for r in caplog.records)

    def test_to_dict(self):
        """Test round trip through a dictionary."""
        config = RouterConfig(context="blog")
        assert RouterConfig.from_dict(config.to_dict()) == config

    def test_configure_logging(self, monkeypatch):
        """Test logging is configured from the config level."""
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        configure_logging(RouterConfig(log_level="debug"))
        assert calls[0]["level"] == logging.DEBUG


class TestHelpers:
    """Test path helpers."""

    def test_request_path(self):
        """Test request path normalization."""
        assert request_path("/users/7/") == "users/7"
        assert request_path("/users/7?x=1#top") == "users/7"
        assert request_path("http://site.com/users/7") == "users/7"
        assert request_path("") == ""

    def test_normalize_base_url(self):
        """Test base url normalization."""
        assert normalize_base_url("http://site.com") == "http://site.com/"
        assert normalize_base_url("http://site.com//app//") == "http://site.com/app/"
        assert normalize_base_url("example.net") == "example.net/"
        assert normalize_base_url("//cdn.site.com") == "//cdn.site.com/"
        assert normalize_base_url("//cdn.site.com//assets/") == "//cdn.site.com/assets/"
