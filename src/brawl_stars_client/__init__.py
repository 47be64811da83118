"""Typed async client for the Brawl Stars API."""

from brawl_stars_client.api_client import (
    BrawlStarsApiError,
    BrawlStarsClient,
    MissingApiKeyError,
    ResponseValidationError,
    encode_tag,
)
from brawl_stars_client.schemas import PagingOptions

__all__ = [
    "BrawlStarsApiError",
    "BrawlStarsClient",
    "MissingApiKeyError",
    "PagingOptions",
    "ResponseValidationError",
    "encode_tag",
]
