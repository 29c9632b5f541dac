"""Errors raised around the blueprint core (input + fetch). The core itself does not raise."""

from typing import Optional


class BlueprintError(Exception):
    """Base class for fatal errors that abort a run."""


class InputError(BlueprintError, ValueError):
    """Neither a URL nor posting text was supplied, or an option is out of range."""


class FetchError(BlueprintError):
    """
    The posting URL could not be retrieved (network failure, timeout, non-200).

    Attributes:
        url: The URL that was requested
        status_code: HTTP status if a response was received
    """

    def __init__(self, message: str, url: str = "", status_code: Optional[int] = None):
        self.message = message
        self.url = url
        self.status_code = status_code

        parts = [message]
        if url:
            parts.append(f"url={url}")
        if status_code is not None:
            parts.append(f"status={status_code}")
        super().__init__(" | ".join(parts))
