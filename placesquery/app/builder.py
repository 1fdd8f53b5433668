from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from placesquery.core.entities import PlacesRequest, SearchKind
from placesquery.core.errors import DecodeError
from placesquery.core.ports import HttpGetter
from placesquery.core.query import BASE_URL, build_url, redact
from placesquery.infrastructure.providers.places.transport import (
    DEFAULT_TIMEOUT,
    RequestsGetter,
)
from placesquery.utils.config import Settings


class PlacesQueryBuilder:
    """Client for the Google Places web service.

    Holds the request fields, snapshots them into a ``PlacesRequest`` for each
    search and performs a single GET. One instance serves one in-flight
    request at a time; it is not safe to share across threads without
    external locking.

    Fields set by a search (location, query, ...) stay on the builder until
    they are overwritten, and extra params apply to every later request
    until ``clear_extra_params`` is called.
    """

    logger = logging.getLogger(__name__)

    def __init__(
        self,
        api_key: str,
        *,
        getter: HttpGetter | None = None,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        encode_values: bool = False,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.encode_values = encode_values
        self._owns_getter = getter is None
        self.getter: HttpGetter = getter or RequestsGetter()

        self.language = "en"
        self.sensor = "false"
        self.result_format = "json"
        self.query = ""
        self.location = ""
        self.radius: float = 0
        self.next_page_token = ""
        self.details_reference = ""
        self.extra_params: dict[str, str] = {}

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any], **kwargs) -> "PlacesQueryBuilder":
        """Build from a framework config mapping carrying the key under ``apiKey``."""
        return cls(config["apiKey"], **kwargs)

    @classmethod
    def from_env(cls, **kwargs) -> "PlacesQueryBuilder":
        settings = Settings.from_env()
        kwargs.setdefault("base_url", settings.base_url)
        kwargs.setdefault("timeout", settings.timeout)
        b = cls(settings.api_key, **kwargs)
        b.set_language(settings.language)
        b.set_sensor(settings.sensor)
        b.set_results_format(settings.result_format)
        return b

    # searches

    def nearby_search(self, location: str, radius: float):
        return self.execute(self.prepare(SearchKind.NEARBY, location=location, radius=radius))

    def radar_search(self, location: str, radius: float):
        return self.execute(self.prepare(SearchKind.RADAR, location=location, radius=radius))

    def text_search(self, query: str):
        """Text search, e.g. ``"hotels in New York"``."""
        return self.execute(self.prepare(SearchKind.TEXT, query=query))

    def next_page_search(self, token: str):
        """Fetch the page behind a ``next_page_token`` from a previous response."""
        return self.execute(self.prepare(SearchKind.NEXT_PAGE, next_page_token=token))

    def details_search(self, reference: str):
        return self.execute(self.prepare(SearchKind.DETAILS, details_reference=reference))

    # setters

    def set_language(self, language: str):
        self.language = language

    def set_sensor(self, sensor: str):
        self.sensor = sensor

    def set_location(self, location: str):
        self.location = location

    def set_radius(self, radius: float):
        self.radius = radius

    def set_query(self, query: str):
        self.query = query

    def set_results_format(self, fmt: str):
        self.result_format = fmt

    def set_next_page_token(self, token: str):
        self.next_page_token = token

    def set_details_reference(self, reference: str):
        self.details_reference = reference

    def add_extra_param(self, name: str, value: str):
        """Add an optional param (``type``, ``keyword``, ...). Repeating a name overwrites it."""
        if not name:
            raise ValueError("extra param name must not be empty")
        self.extra_params[name] = value

    def clear_extra_params(self):
        self.extra_params.clear()

    # requests

    def build_request(self, kind: SearchKind) -> PlacesRequest:
        return PlacesRequest(
            kind=kind,
            api_key=self.api_key,
            sensor=self.sensor,
            language=self.language,
            result_format=self.result_format,
            query=self.query,
            location=self.location,
            radius=self.radius,
            next_page_token=self.next_page_token,
            details_reference=self.details_reference,
            extra_params=tuple(self.extra_params.items()),
        )

    def request_url(self, request: PlacesRequest) -> str:
        return build_url(request, base_url=self.base_url, encode_values=self.encode_values)

    def execute(self, request: PlacesRequest):
        """GET ``request`` and decode the body when the format is JSON."""
        url = self.request_url(request)
        self.logger.debug("Places %s -> %s", request.kind.name, redact(url))
        body = self.getter.get(url, self.timeout)
        if not request.wants_json:
            return body
        try:
            return json.loads(body)
        except ValueError as e:
            self.logger.warning("Invalid JSON from %s: %s", redact(url), e)
            raise DecodeError(f"Invalid JSON response: {e}", body=body, cause=e) from e

    def prepare(self, kind: SearchKind, **fields) -> PlacesRequest:
        """Apply ``fields`` through their setters, then snapshot a request of ``kind``."""
        for name, value in fields.items():
            setter = _FIELD_SETTERS.get(name)
            if setter is None:
                raise TypeError(f"unknown request field {name!r}")
            setter(self, value)
        return self.build_request(kind)

    def close(self):
        if self._owns_getter:
            self.getter.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


_FIELD_SETTERS = {
    "location": PlacesQueryBuilder.set_location,
    "radius": PlacesQueryBuilder.set_radius,
    "query": PlacesQueryBuilder.set_query,
    "next_page_token": PlacesQueryBuilder.set_next_page_token,
    "details_reference": PlacesQueryBuilder.set_details_reference,
}
