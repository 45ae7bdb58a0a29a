"""Custom Search requests."""

from .web_search import SafetyLevel, SearchType, WebSearchRequest

__all__ = ["WebSearchRequest", "SafetyLevel", "SearchType"]
