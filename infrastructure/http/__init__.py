"""
HTTP Infrastructure - HTTP client helpers.

This module provides:
- create_http_client: pooled httpx.AsyncClient used by collaborator adapters
- PodcastSnippetClient: Python client for the Podcast Snippet API
"""

from .api_client import PodcastSnippetClient
from .client import HTTP_LIMITS, HTTP_TIMEOUT, PooledHttpClient, create_http_client

__all__ = [
    "HTTP_LIMITS",
    "HTTP_TIMEOUT",
    "PooledHttpClient",
    "PodcastSnippetClient",
    "create_http_client",
]
