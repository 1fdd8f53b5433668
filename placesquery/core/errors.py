from __future__ import annotations


class PlacesError(RuntimeError):
    """Base class for errors raised by placesquery."""


class TransportError(PlacesError):
    """The GET itself failed: network error, DNS, or a non-success status."""

    def __init__(
        self,
        message: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.cause = cause


class DecodeError(PlacesError):
    """A JSON response body could not be decoded. ``body`` keeps the raw text."""

    def __init__(self, message: str, *, body: str, cause: BaseException | None = None):
        super().__init__(message)
        self.body = body
        self.cause = cause


class ConfigError(PlacesError):
    """Settings could not be loaded from the environment."""
