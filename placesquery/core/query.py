from __future__ import annotations

import re
from urllib.parse import quote

from .entities import PlacesRequest, SearchKind

BASE_URL = "https://maps.googleapis.com/maps/api/place"

_KEY_RE = re.compile(r"([?&]key=)[^&\s]*")


def _fmt(value, encode: bool) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    s = str(value)
    # keep "lat,lng" readable
    return quote(s, safe=",") if encode else s


def render_query(request: PlacesRequest, *, encode_values: bool = False) -> str:
    """Render the query string for ``request``.

    ``key`` and ``sensor`` always come first, then the kind-specific fields,
    then the extra params in insertion order. Values are passed through
    literally unless ``encode_values`` is set.
    """
    def f(v):
        return _fmt(v, encode_values)

    params = f"key={f(request.api_key)}&sensor={f(request.sensor)}"

    kind = request.kind
    if kind in (SearchKind.NEARBY, SearchKind.RADAR):
        params += f"&location={f(request.location)}&radius={f(request.radius)}"
    elif kind is SearchKind.TEXT:
        params += f"&query={f(request.query)}"
    elif kind is SearchKind.DETAILS:
        params += f"&reference={f(request.details_reference)}"
    elif kind is SearchKind.NEXT_PAGE:
        params += f"&pagetoken={f(request.next_page_token)}"

    for name, value in request.extra_params:
        params += f"&{name}={f(value)}"

    return params


def build_url(
    request: PlacesRequest, *, base_url: str = BASE_URL, encode_values: bool = False
) -> str:
    base = base_url.rstrip("/")
    query = render_query(request, encode_values=encode_values)
    return f"{base}/{request.path_segment}/{request.result_format}?{query}"


def redact(url: str) -> str:
    """Hide the API key before a URL is logged or attached to an error."""
    return _KEY_RE.sub(r"\1***", url)
