from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor

from .config import ResponseConfiguration
from .deferred import DeferredHttpResponse
from .models import Response

logger = logging.getLogger(__name__)


class FetchService:
    """
    Issues fetches on a worker pool and hands back deferred responses.

    Args:
        fetch: Callable performing the HTTP exchange and returning a Response
        max_workers: Number of fetches allowed in flight at once
        conf: Response defaults passed to every response
    """

    def __init__(
        self,
        fetch: Callable[..., Response],
        max_workers: int = 4,
        conf: ResponseConfiguration | None = None,
    ) -> None:
        self.fetch = fetch
        self.max_workers = max_workers
        self.conf = conf
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="lazyfetch"
        )

    def fetch_async(self, *args, **kwargs) -> DeferredHttpResponse:
        """
        Start a fetch and return immediately.

        Example:
            response = service.fetch_async("GET", url)
            ...
            if response.status_code == 200:
                data = response.json_object()
        """
        future = self._executor.submit(self.fetch, *args, **kwargs)
        logger.debug("submitted fetch %r", future)
        return DeferredHttpResponse(future, conf=self.conf)

    def fetch_now(self, *args, **kwargs) -> DeferredHttpResponse:
        """Start a fetch and wait for it before returning."""
        response = self.fetch_async(*args, **kwargs)
        response.resolve()
        return response

    def close(self, wait: bool = False) -> None:
        """
        Stop the worker pool.

        Queued fetches are cancelled, so their responses report a
        disconnect. Fetches already running cannot be cancelled and carry
        on in the background unless ``wait`` is true, in which case this
        call blocks until they finish.

        Args:
            wait: Join the worker threads before returning (default: False)
        """
        logger.debug("shutting down fetch workers (wait=%s)", wait)
        self._executor.shutdown(wait=wait, cancel_futures=True)

    def __enter__(self) -> FetchService:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
