"""Tests for lazyfetch.config module."""

import pytest
from pydantic import ValidationError

from lazyfetch.config import ResponseConfiguration, get_configuration


@pytest.fixture(autouse=True)
def clear_cached_configuration():
    get_configuration.cache_clear()
    yield
    get_configuration.cache_clear()


class TestResponseConfiguration:
    """Tests for ResponseConfiguration."""

    def test_defaults(self, monkeypatch):
        """Test default charset and decompression."""
        monkeypatch.delenv("LAZYFETCH_CHARSET", raising=False)
        monkeypatch.delenv("LAZYFETCH_AUTO_DECOMPRESS", raising=False)
        conf = ResponseConfiguration()
        assert conf.charset == "utf-8"
        assert conf.auto_decompress is False

    def test_environment_overrides(self, monkeypatch):
        """Test LAZYFETCH_ variables are read."""
        monkeypatch.setenv("LAZYFETCH_CHARSET", "latin-1")
        monkeypatch.setenv("LAZYFETCH_AUTO_DECOMPRESS", "true")
        conf = ResponseConfiguration()
        assert conf.charset == "latin-1"
        assert conf.auto_decompress is True

    def test_explicit_values(self):
        """Test keyword arguments are accepted."""
        assert ResponseConfiguration(charset="ascii").charset == "ascii"

    def test_frozen(self):
        """Test the configuration cannot be mutated."""
        conf = ResponseConfiguration()
        with pytest.raises(ValidationError):
            conf.charset = "ascii"


class TestGetConfiguration:
    """Tests for the shared configuration instance."""

    def test_returns_same_instance(self):
        """Test the configuration is loaded once."""
        assert get_configuration() is get_configuration()

    def test_reads_environment_on_first_load(self, monkeypatch):
        """Test the first load picks up the environment."""
        monkeypatch.setenv("LAZYFETCH_CHARSET", "utf-16")
        assert get_configuration().charset == "utf-16"
