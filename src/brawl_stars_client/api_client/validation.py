"""Response validation against the schema catalog."""

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from brawl_stars_client.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


class ResponseValidationError(Exception):
    """Exception raised when a successful response does not match its schema."""

    def __init__(
        self,
        message: str,
        endpoint: str,
        url: str,
        response_body: str,
        original_error: Exception | None = None,
    ):
        super().__init__(message)
        self.endpoint = endpoint
        self.url = url
        self.response_body = response_body
        self.original_error = original_error


def validate_response(schema: type[T], data: Any, endpoint: str, url: str) -> T:
    """Validate API response data against a Pydantic schema.

    Args:
        schema: Pydantic model class to validate against
        data: Decoded JSON body
        endpoint: Endpoint name for logging
        url: Full URL for logging

    Returns:
        Validated model instance

    Raises:
        ResponseValidationError: If the body does not match the schema
    """
    try:
        return schema.model_validate(data)
    except PydanticValidationError as e:
        logger.error(
            "API response validation failed",
            endpoint=endpoint,
            url=url,
            error_count=e.error_count(),
            validation_errors=e.errors(include_url=False),
        )
        raise ResponseValidationError(
            message=f"Validation failed for {endpoint}: {e}",
            endpoint=endpoint,
            url=url,
            response_body=data if isinstance(data, str) else json.dumps(data, default=str),
            original_error=e,
        ) from e
