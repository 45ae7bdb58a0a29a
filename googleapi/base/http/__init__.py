"""HTTP utilities: pooled httpx clients and the query transport."""

from .client import get_httpx_client, close_all_clients
from .transport import HttpTransport

__all__ = ["get_httpx_client", "close_all_clients", "HttpTransport"]
