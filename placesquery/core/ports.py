from __future__ import annotations

from typing import Protocol


class HttpGetter(Protocol):
    """Fetch capability the builder is given: URL in, body text out.

    Implementations raise ``TransportError`` on network failures and on
    non-success statuses.
    """

    def get(self, url: str, timeout: float) -> str: ...

    def close(self) -> None: ...
