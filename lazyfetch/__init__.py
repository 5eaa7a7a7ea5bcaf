from lazyfetch.config import ResponseConfiguration, get_configuration
from lazyfetch.deferred import DeferredHttpResponse, PendingFetch
from lazyfetch.errors import (
    ApplicationError,
    BodyEncodingError,
    ContentError,
    DisconnectedError,
    LazyFetchError,
    TransportError,
)
from lazyfetch.headers import HeaderIndex
from lazyfetch.models import HttpResponse, Response
from lazyfetch.service import FetchService
from lazyfetch.status import Outcome, classify, is_success

__all__ = [
    "HttpResponse",
    "Response",
    "DeferredHttpResponse",
    "PendingFetch",
    "FetchService",
    "HeaderIndex",
    "ResponseConfiguration",
    "get_configuration",
    "Outcome",
    "classify",
    "is_success",
    "LazyFetchError",
    "ApplicationError",
    "BodyEncodingError",
    "TransportError",
    "DisconnectedError",
    "ContentError",
]
