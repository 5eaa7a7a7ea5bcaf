"""Pytest configuration and fixtures."""

from concurrent.futures import Future

import pytest

from lazyfetch.config import ResponseConfiguration
from lazyfetch.models import Response


@pytest.fixture
def conf():
    """Create a configuration with the default charset."""
    return ResponseConfiguration(charset="utf-8", auto_decompress=False)


@pytest.fixture
def sample_response(conf):
    """Create a sample Response object."""
    return Response(
        status_code=200,
        reason="OK",
        http_version="1.1",
        headers=[
            ("Content-Type", "application/json"),
            ("Content-Length", "13"),
        ],
        body=b'{"key":"val"}',
        conf=conf,
    )


@pytest.fixture
def completed(conf):
    """Build a finished Future holding a Response."""

    def _completed(status_code, headers=(), body=b""):
        future = Future()
        future.set_result(Response(status_code, "", "1.1", headers, body, conf=conf))
        return future

    return _completed
