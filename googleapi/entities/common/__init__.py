"""Shared request building blocks."""

from .base_request import BaseRequest, SignableRequest, add_param, format_value

__all__ = ["BaseRequest", "SignableRequest", "add_param", "format_value"]
