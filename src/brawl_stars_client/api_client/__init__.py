"""API client package."""

from brawl_stars_client.api_client.brawl_stars_client import (
    BrawlStarsApiError,
    BrawlStarsClient,
    MissingApiKeyError,
    encode_tag,
)
from brawl_stars_client.api_client.validation import ResponseValidationError, validate_response

__all__ = [
    "BrawlStarsApiError",
    "BrawlStarsClient",
    "MissingApiKeyError",
    "ResponseValidationError",
    "encode_tag",
    "validate_response",
]
