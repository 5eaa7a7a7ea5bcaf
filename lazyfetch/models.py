from __future__ import annotations

import io
import json
from collections.abc import Iterable
from typing import BinaryIO, TextIO

from .config import ResponseConfiguration, get_configuration
from .errors import ContentError
from .headers import HeaderIndex


class HttpResponse:
    """
    Response interface shared by every transport backend.

    Subclasses supply the status code, header lookups and raw body; the
    stream, text and JSON views are derived here from ``content``.
    """

    def __init__(self, conf: ResponseConfiguration | None = None) -> None:
        self.conf = conf if conf is not None else get_configuration()
        self.charset = self.conf.charset

    @property
    def status_code(self) -> int:
        raise NotImplementedError

    def header(self, name: str) -> str | None:
        raise NotImplementedError

    def header_fields(self) -> dict[str, list[str]]:
        raise NotImplementedError

    @property
    def content(self) -> bytes:
        raise NotImplementedError

    def stream(self) -> BinaryIO:
        """Return a fresh read-only stream over the body."""
        return io.BufferedReader(io.BytesIO(self.content))

    def reader(self) -> TextIO:
        return io.TextIOWrapper(self.stream(), encoding=self.charset)

    @property
    def text(self) -> str:
        return self.content.decode(self.charset)

    def json(self) -> object:
        return json.loads(self.text)

    def json_object(self) -> dict:
        data = self.json()
        if not isinstance(data, dict):
            raise ContentError(f"Expected a JSON object, got {type(data).__name__}")
        return data

    def json_array(self) -> list:
        data = self.json()
        if not isinstance(data, list):
            raise ContentError(f"Expected a JSON array, got {type(data).__name__}")
        return data

    def disconnect(self) -> None:
        pass

    def __enter__(self) -> HttpResponse:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.disconnect()


class Response(HttpResponse):
    """
    Completed HTTP response as handed back by a fetcher.

    Preserves raw header order and case while exposing the shared
    response interface.
    """

    def __init__(
        self,
        status_code: int,
        reason: str,
        http_version: str,
        headers: Iterable[tuple[str, str]],
        body: bytes,
        conf: ResponseConfiguration | None = None,
    ) -> None:
        super().__init__(conf)
        self._status_code = status_code
        self.reason = reason
        self.http_version = http_version
        self.raw_headers: list[tuple[str, str]] = list(headers)
        self.headers = HeaderIndex(self.raw_headers)
        self._body = body

    @property
    def status_code(self) -> int:
        return self._status_code

    def header(self, name: str) -> str | None:
        return self.headers.get(name)

    def header_fields(self) -> dict[str, list[str]]:
        return self.headers.as_fields()

    @property
    def content(self) -> bytes:
        return self._body

    def __repr__(self) -> str:
        return f"<Response [{self._status_code}] {len(self._body)} bytes>"
