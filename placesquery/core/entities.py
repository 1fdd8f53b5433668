from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class SearchKind(str, Enum):
    NEARBY = "nearbysearch"
    RADAR = "radarsearch"
    TEXT = "textsearch"
    DETAILS = "details"
    NEXT_PAGE = "next_page"


class ResultFormat(str, Enum):
    JSON = "json"
    XML = "xml"


def effective_path_segment(kind: SearchKind) -> str:
    """Path segment the request is sent to.

    Next-page requests hit the text search endpoint, driven by ``pagetoken``.
    """
    if kind is SearchKind.NEXT_PAGE:
        return SearchKind.TEXT.value
    return kind.value


@dataclass(frozen=True)
class PlacesRequest:
    kind: SearchKind
    api_key: str
    sensor: str = "false"
    language: str = "en"
    result_format: str = ResultFormat.JSON.value
    query: str = ""
    location: str = ""
    radius: float = 0
    next_page_token: str = ""
    details_reference: str = ""
    extra_params: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    @property
    def path_segment(self) -> str:
        return effective_path_segment(self.kind)

    @property
    def wants_json(self) -> bool:
        return self.result_format == ResultFormat.JSON.value
