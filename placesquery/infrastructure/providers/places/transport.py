from __future__ import annotations

import logging

import requests

from placesquery.core.errors import TransportError
from placesquery.core.query import redact

DEFAULT_TIMEOUT = 30


class RequestsGetter:
    """``HttpGetter`` backed by a ``requests.Session``.

    One GET per call, no retries. Anything outside 2xx is a failure.
    """

    logger = logging.getLogger(__name__)

    def __init__(self, session: requests.Session | None = None):
        self._owns_session = session is None
        self.session = session or requests.Session()

    def get(self, url: str, timeout: float = DEFAULT_TIMEOUT) -> str:
        safe_url = redact(url)
        try:
            r = self.session.get(url, timeout=timeout)
        except requests.RequestException as e:
            # requests puts the full URL, key included, in its messages
            reason = f"{type(e).__name__}: {redact(str(e))}"
            self.logger.warning("GET %s failed: %s", safe_url, reason)
            raise TransportError(f"GET failed: {reason}", url=safe_url, cause=e) from e

        if not 200 <= r.status_code < 300:
            self.logger.warning("GET %s returned HTTP %s", safe_url, r.status_code)
            raise TransportError(
                f"Places API HTTP {r.status_code}: {redact(r.text[:200])}",
                url=safe_url,
                status_code=r.status_code,
            )
        return r.text

    def close(self):
        if self._owns_session:
            self.session.close()
