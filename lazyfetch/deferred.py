"""
Lazily resolved response over an in-flight fetch.

The fetch is awaited on first access to any response attribute, exactly
once. Its outcome, success or failure, is cached for every later access.
"""

from __future__ import annotations

import logging
import threading
from typing import Protocol

from .compression import decode_body
from .config import ResponseConfiguration
from .errors import (
    ApplicationError,
    BodyEncodingError,
    DisconnectedError,
    LazyFetchError,
    TransportError,
)
from .headers import HeaderIndex
from .models import HttpResponse, Response
from .status import Outcome, classify

logger = logging.getLogger(__name__)


class PendingFetch(Protocol):
    """Handle to an in-flight fetch. ``concurrent.futures.Future`` fits."""

    def result(self, timeout: float | None = None) -> Response: ...

    def cancel(self) -> bool: ...

    def done(self) -> bool: ...

    def cancelled(self) -> bool: ...


class DeferredHttpResponse(HttpResponse):
    """
    Response backed by a pending fetch.

    Accessors block until the fetch completes. A completed status is
    checked against the API status policy: client errors become an
    ``ApplicationError`` carrying the body text, 5xx codes pass through.

    Errors surface as ``TransportError`` from every accessor, except that
    ``text`` and the JSON helpers raise an ``ApplicationError`` as is.

    Args:
        pending: In-flight fetch yielding a ``Response``
        conf: Response defaults (default: the process-wide configuration)
    """

    def __init__(
        self,
        pending: PendingFetch,
        conf: ResponseConfiguration | None = None,
    ) -> None:
        super().__init__(conf)
        self._pending = pending
        self._resolved = False
        self._error: BaseException | None = None
        self._status_code = 0
        self._headers: HeaderIndex | None = None
        self._body = b""
        self._lock = threading.Lock()

    @property
    def status_code(self) -> int:
        self._ensure()
        return self._status_code

    def header(self, name: str) -> str | None:
        self._ensure()
        return self._headers.get(name)

    def header_fields(self) -> dict[str, list[str]]:
        self._ensure()
        return self._headers.as_fields()

    @property
    def content(self) -> bytes:
        self._ensure()
        return self._body

    @property
    def text(self) -> str:
        self._ensure(application_errors=True)
        return super().text

    def resolve(self) -> None:
        """Wait for the fetch if needed and raise its terminal error, if any."""
        self._ensure()

    def disconnect(self) -> None:
        """Cancel the fetch if it is still running. Never waits."""
        if not self._pending.done() and not self._pending.cancelled():
            logger.debug("cancelling pending fetch %r", self._pending)
            self._pending.cancel()

    def _ensure(self, application_errors: bool = False) -> None:
        try:
            self._ensure_response()
        except BodyEncodingError:
            raise
        except ApplicationError as exc:
            if application_errors:
                raise
            raise TransportError(exc) from exc
        except Exception as exc:
            raise TransportError(exc) from exc

    def _ensure_response(self) -> None:
        logger.debug("resolve entered")
        with self._lock:
            if self._resolved:
                if self._error is not None:
                    # Fresh traceback so repeated reads do not pile up frames.
                    raise self._error.with_traceback(None)
                return
            # Latch before waiting so the fetch is never driven twice.
            self._resolved = True
            if self._pending.cancelled():
                self._error = DisconnectedError("HttpResponse already disconnected.")
                raise self._error

            try:
                result = self._pending.result()
            except Exception as exc:
                if self._pending.cancelled():
                    self._error = DisconnectedError("HttpResponse already disconnected.")
                    raise self._error from exc
                self._error = exc
                raise
            except BaseException as exc:
                self._error = InterruptedError("Interrupted while waiting for the response")
                self._error.__cause__ = exc
                raise

            if result is None:
                self._error = LazyFetchError("Fetch completed without a response")
                raise self._error

            self._populate(result)

    def _populate(self, result: Response) -> None:
        self._status_code = result.status_code
        self._headers = HeaderIndex(result.raw_headers)
        body = result.content
        if self.conf.auto_decompress:
            body = decode_body(body, self._headers.find("Content-Encoding"))
        self._body = body
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(body.decode("utf-8", errors="replace"))

        if classify(self._status_code) is Outcome.APPLICATION_ERROR:
            try:
                message = body.decode("utf-8")
            except UnicodeDecodeError as exc:
                self._error = BodyEncodingError(f"Response body is not valid UTF-8: {exc}")
                raise self._error from exc
            self._error = ApplicationError(message, self._status_code)
            raise self._error

    def __repr__(self) -> str:
        return (
            f"<DeferredHttpResponse pending={self._pending!r} "
            f"resolved={self._resolved} headers={self._headers!r}>"
        )
