"""Async Brawl Stars API client with response validation and error normalization."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import aiohttp
from pydantic import ValidationError as PydanticValidationError
from yarl import URL

from brawl_stars_client.api_client.validation import validate_response
from brawl_stars_client.config import DEFAULT_BASE_URL, Settings, get_settings
from brawl_stars_client.logging_config import get_logger
from brawl_stars_client.schemas.brawl_stars_api import (
    BattleList,
    BrawlerDefinition,
    BrawlerList,
    ClientError,
    Club,
    ClubMemberList,
    ClubRankingList,
    PagingOptions,
    Player,
    PlayerRankingList,
    ScheduledEvents,
)

logger = get_logger(__name__)

DEFAULT_ERROR_MESSAGE = "An unknown API error occurred"

PagingInput = PagingOptions | Mapping[str, Any] | None


class MissingApiKeyError(ValueError):
    """Raised when a client is created without an API key."""

    def __init__(self) -> None:
        super().__init__("API key is required to interact with the Brawl Stars API.")


class BrawlStarsApiError(Exception):
    """Exception for failed Brawl Stars API requests.

    status_code is None when no response was received (connection refused,
    DNS failure, timeout). Otherwise it holds the HTTP status and error_data
    holds the error envelope sent by the API, if any.
    """

    def __init__(
        self,
        message: str,
        url: str,
        status_code: int | None = None,
        error_data: ClientError | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.status_code = status_code
        self.error_data = error_data

    @property
    def is_transport_error(self) -> bool:
        """True when the request never got a response."""
        return self.status_code is None

    def __str__(self) -> str:
        if self.status_code is None:
            return f"Brawl Stars API request failed: {self.message}"
        return f"Brawl Stars API error {self.status_code}: {self.message}"


def encode_tag(tag: str) -> str:
    """Encode a player or club tag for use in a request path.

    The leading '#' is optional. The API expects the hash itself
    percent-encoded as part of the path segment, so '#2V0G8P' becomes
    '%232V0G8P'.
    """
    if tag.startswith("#"):
        tag = tag[1:]
    return "%23" + quote(tag, safe="")


def _paging_params(options: PagingInput) -> dict[str, object] | None:
    if options is None:
        return None
    if not isinstance(options, PagingOptions):
        options = PagingOptions.model_validate(dict(options))
    return options.to_params() or None


class BrawlStarsClient:
    """Async client for the Brawl Stars API.

    One aiohttp session is opened lazily and reused for every request.
    Requests are independent: there is no retry, rate limiting or caching.
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str | None = None,
        timeout: aiohttp.ClientTimeout | None = None,
    ) -> None:
        """Initialize the Brawl Stars API client.

        Args:
            api_key: Brawl Stars API key (required)
            base_url: API root override (defaults to the production API)
            timeout: Transport timeout passed to aiohttp (defaults to aiohttp's)

        Raises:
            MissingApiKeyError: If api_key is empty or None
        """
        if not api_key:
            raise MissingApiKeyError()

        self._base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
        }
        self._timeout = timeout
        self._session: aiohttp.ClientSession | None = None

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> BrawlStarsClient:
        """Create a client from environment settings.

        Args:
            settings: Settings to use (defaults to cached settings)
        """
        settings = settings or get_settings()
        return cls(
            api_key=settings.brawl_stars_api_key,
            base_url=settings.brawl_stars_base_url,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        return dict(self._headers)

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session."""
        if self._session is None or self._session.closed:
            kwargs: dict[str, Any] = {"headers": self._headers}
            if self._timeout is not None:
                kwargs["timeout"] = self._timeout
            self._session = aiohttp.ClientSession(**kwargs)
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> BrawlStarsClient:
        """Async context manager entry."""
        return self

    async def __aexit__(
        self,
        exc_type: BaseException | None,
        exc_val: BaseException | None,
        exc_tb: BaseException | None,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    def _build_url(self, endpoint: str) -> str:
        return f"{self._base_url}{endpoint}"

    async def _request(
        self,
        endpoint: str,
        params: dict[str, object] | None = None,
    ) -> object:
        """Make a single GET request to the Brawl Stars API.

        Args:
            endpoint: API endpoint path, already encoded
            params: Query parameters

        Returns:
            JSON response data

        Raises:
            BrawlStarsApiError: If no response was received or the status is not 2xx
        """
        url = self._build_url(endpoint)
        session = await self._get_session()

        logger.debug("Making Brawl Stars API request", url=url, params=params)

        try:
            # Path is pre-encoded; keep %23 from being quoted again
            async with session.request(
                "GET", URL(url, encoded=True), params=params
            ) as response:
                if not 200 <= response.status < 300:
                    raise await self._error_from_response(response, url)

                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    logger.error(
                        "Failed to parse JSON response",
                        url=url,
                        status_code=response.status,
                        error=str(e),
                    )
                    raise BrawlStarsApiError(
                        f"Invalid JSON response: {e}",
                        url,
                        status_code=response.status,
                    ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            status_code = e.status if isinstance(e, aiohttp.ClientResponseError) else None
            message = str(e) or DEFAULT_ERROR_MESSAGE
            logger.warning(
                "Brawl Stars API request failed without response",
                url=url,
                error_type=type(e).__name__,
                error=message,
            )
            raise BrawlStarsApiError(message, url, status_code=status_code) from e

    async def _error_from_response(
        self,
        response: aiohttp.ClientResponse,
        url: str,
    ) -> BrawlStarsApiError:
        """Build the error for a non-2xx response, using the API's error body if present."""
        error_data: ClientError | None = None
        try:
            body = await response.json(content_type=None)
        except ValueError:
            body = None

        if isinstance(body, dict):
            try:
                error_data = ClientError.model_validate(body)
            except PydanticValidationError as e:
                # Keep the body as sent even when it does not match the envelope
                logger.warning(
                    "Error body does not match the ClientError envelope",
                    url=url,
                    status_code=response.status,
                    error=str(e),
                )
                error_data = ClientError.model_construct(**body)

        remote_message = error_data.message if error_data else None
        message = (
            (remote_message if isinstance(remote_message, str) else None)
            or response.reason
            or DEFAULT_ERROR_MESSAGE
        )

        logger.error(
            "Brawl Stars API error",
            status_code=response.status,
            url=url,
            reason=error_data.reason if error_data else None,
            message=message,
        )
        return BrawlStarsApiError(
            message,
            url,
            status_code=response.status,
            error_data=error_data,
        )

    # Players

    async def get_player(self, player_tag: str) -> Player:
        """Get information about a single player.

        Args:
            player_tag: Player tag, with or without the leading '#'

        Returns:
            Player profile
        """
        endpoint = f"/players/{encode_tag(player_tag)}"
        data = await self._request(endpoint)
        return validate_response(Player, data, "players", self._build_url(endpoint))

    async def get_player_battle_log(self, player_tag: str) -> BattleList:
        """Get the list of recent battles for a player.

        New battles may take up to 30 minutes to appear.

        Args:
            player_tag: Player tag, with or without the leading '#'

        Returns:
            Recent battles
        """
        endpoint = f"/players/{encode_tag(player_tag)}/battlelog"
        data = await self._request(endpoint)
        return validate_response(BattleList, data, "players/battlelog", self._build_url(endpoint))

    # Clubs

    async def get_club(self, club_tag: str) -> Club:
        """Get information about a single club.

        Args:
            club_tag: Club tag, with or without the leading '#'

        Returns:
            Club details including members
        """
        endpoint = f"/clubs/{encode_tag(club_tag)}"
        data = await self._request(endpoint)
        return validate_response(Club, data, "clubs", self._build_url(endpoint))

    async def get_club_members(
        self,
        club_tag: str,
        options: PagingInput = None,
    ) -> ClubMemberList:
        """List members of a club.

        Args:
            club_tag: Club tag, with or without the leading '#'
            options: Pagination (limit, after, before)

        Returns:
            Page of club members
        """
        endpoint = f"/clubs/{encode_tag(club_tag)}/members"
        data = await self._request(endpoint, params=_paging_params(options))
        return validate_response(ClubMemberList, data, "clubs/members", self._build_url(endpoint))

    # Brawlers

    async def get_brawlers(self, options: PagingInput = None) -> BrawlerList:
        """List available brawlers.

        Args:
            options: Pagination (limit, after, before)

        Returns:
            Page of brawler definitions
        """
        endpoint = "/brawlers"
        data = await self._request(endpoint, params=_paging_params(options))
        return validate_response(BrawlerList, data, "brawlers", self._build_url(endpoint))

    async def get_brawler(self, brawler_id: int | str) -> BrawlerDefinition:
        """Get a brawler definition by id.

        Args:
            brawler_id: Brawler identifier (e.g. 16000000)

        Returns:
            Brawler definition
        """
        endpoint = f"/brawlers/{brawler_id}"
        data = await self._request(endpoint)
        return validate_response(BrawlerDefinition, data, "brawlers/id", self._build_url(endpoint))

    # Rankings

    async def get_player_rankings(
        self,
        country_code: str,
        options: PagingInput = None,
    ) -> PlayerRankingList:
        """Get player rankings for a country or globally.

        Args:
            country_code: Two-letter country code, or 'global'
            options: Pagination (limit, after, before)

        Returns:
            Page of ranked players
        """
        endpoint = f"/rankings/{country_code}/players"
        data = await self._request(endpoint, params=_paging_params(options))
        return validate_response(
            PlayerRankingList, data, "rankings/players", self._build_url(endpoint)
        )

    async def get_club_rankings(
        self,
        country_code: str,
        options: PagingInput = None,
    ) -> ClubRankingList:
        """Get club rankings for a country or globally.

        Args:
            country_code: Two-letter country code, or 'global'
            options: Pagination (limit, after, before)

        Returns:
            Page of ranked clubs
        """
        endpoint = f"/rankings/{country_code}/clubs"
        data = await self._request(endpoint, params=_paging_params(options))
        return validate_response(ClubRankingList, data, "rankings/clubs", self._build_url(endpoint))

    async def get_brawler_rankings(
        self,
        country_code: str,
        brawler_id: int | str,
        options: PagingInput = None,
    ) -> PlayerRankingList:
        """Get player rankings for a single brawler.

        Args:
            country_code: Two-letter country code, or 'global'
            brawler_id: Brawler identifier
            options: Pagination (limit, after, before)

        Returns:
            Page of ranked players
        """
        endpoint = f"/rankings/{country_code}/brawlers/{brawler_id}"
        data = await self._request(endpoint, params=_paging_params(options))
        return validate_response(
            PlayerRankingList, data, "rankings/brawlers", self._build_url(endpoint)
        )

    # Events

    async def get_event_rotation(self) -> ScheduledEvents:
        """Get the current event rotation."""
        endpoint = "/events/rotation"
        data = await self._request(endpoint)
        return validate_response(ScheduledEvents, data, "events/rotation", self._build_url(endpoint))
