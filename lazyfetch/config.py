"""Response defaults shared by every transport backend."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ResponseConfiguration(BaseSettings):
    """
    Defaults applied when a response is created.

    Values may be supplied directly or through ``LAZYFETCH_*`` environment
    variables.
    """

    charset: str = Field(
        description="Charset used to decode response bodies into text.",
        default="utf-8",
    )

    auto_decompress: bool = Field(
        description="Decode gzip, deflate and br bodies that still carry a Content-Encoding header. "
        "Off by default so bodies are stored exactly as delivered.",
        default=False,
    )

    model_config = SettingsConfigDict(
        env_prefix="LAZYFETCH_",
        frozen=True,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_configuration() -> ResponseConfiguration:
    """Return the process-wide configuration, loaded once."""
    return ResponseConfiguration()
