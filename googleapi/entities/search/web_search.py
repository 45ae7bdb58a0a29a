"""Custom Search JSON API request (web and image search).

The Custom Search API authenticates with an API key only; it has no premium
URL signing, so ``client_id`` is fixed to ``None``.
"""
from __future__ import annotations

from enum import Enum
from typing import ClassVar, List, Optional, Sequence, Tuple

from pydantic import Field

from ...config.defaults import SEARCH_DEFAULT_BASE_URL
from ...validation.rules import ValidationRule, required
from ..common.base_request import BaseRequest, add_param


class SafetyLevel(str, Enum):
    OFF = "off"
    ACTIVE = "active"


class SearchType(str, Enum):
    IMAGE = "image"


class WebSearchRequest(BaseRequest):
    """Custom Search request.

    Attributes:
        search_engine_id: Programmable search engine id (``cx``).
        query: Search terms (``q``).
        num: Results per page, 1..10.
        start: 1-based index of the first result.
        safe: SafeSearch level.
        search_type: ``image`` for image search; web search when ``None``.
        language: Interface language (``hl``).
    """

    api_name: ClassVar[str] = "customsearch"
    base_url: ClassVar[str] = SEARCH_DEFAULT_BASE_URL

    client_id: None = None
    search_engine_id: Optional[str] = None
    query: Optional[str] = None
    num: Optional[int] = Field(default=None, ge=1, le=10)
    start: Optional[int] = Field(default=None, ge=1)
    safe: Optional[SafetyLevel] = None
    search_type: Optional[SearchType] = None
    language: Optional[str] = None

    def required_fields(self) -> Sequence[ValidationRule]:
        return (
            required("key"),
            required("search_engine_id"),
            required("query"),
        )

    def api_parameters(self) -> List[Tuple[str, str]]:
        params: List[Tuple[str, str]] = []
        add_param(params, "cx", self.search_engine_id)
        add_param(params, "q", self.query)
        add_param(params, "num", self.num)
        add_param(params, "start", self.start)
        add_param(params, "safe", self.safe)
        add_param(params, "searchType", self.search_type)
        add_param(params, "hl", self.language)
        return params


__all__ = ["WebSearchRequest", "SafetyLevel", "SearchType"]
