"""Pydantic schemas for Brawl Stars API responses.

These schemas validate and type the JSON responses from the Brawl Stars API.
Field aliases are the exact JSON keys used by the API. Several fields are
loosely specified upstream (localized names, map descriptors, battle details)
and are kept as raw JSON values instead of concrete models.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, JsonValue, model_validator

_DTO_CONFIG = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class ClubType(str, Enum):
    """Club membership policy."""

    OPEN = "open"
    INVITE_ONLY = "inviteOnly"
    CLOSED = "closed"
    UNKNOWN = "unknown"


class ClubMemberRole(str, Enum):
    """Role of a member within a club."""

    NOT_MEMBER = "notMember"
    MEMBER = "member"
    PRESIDENT = "president"
    SENIOR = "senior"
    VICE_PRESIDENT = "vicePresident"
    UNKNOWN = "unknown"


class Icon(BaseModel):
    """Profile icon reference."""

    id: int

    model_config = _DTO_CONFIG


class ClubIdentifier(BaseModel):
    """Club reference embedded in a player profile.

    The API sends an empty object when the player is not in a club.
    """

    tag: str | None = None
    name: str | None = None

    model_config = _DTO_CONFIG


class Gadget(BaseModel):
    name: JsonValue
    id: int

    model_config = _DTO_CONFIG


class StarPower(BaseModel):
    name: JsonValue
    id: int

    model_config = _DTO_CONFIG


class Gear(BaseModel):
    name: JsonValue
    id: int
    level: int

    model_config = _DTO_CONFIG


class BrawlerStat(BaseModel):
    """Per-brawler progress of a single player."""

    gadgets: list[Gadget]
    star_powers: list[StarPower] = Field(..., alias="starPowers")
    id: int
    rank: int
    trophies: int
    highest_trophies: int = Field(..., alias="highestTrophies")
    power: int
    gears: list[Gear]
    name: JsonValue

    model_config = _DTO_CONFIG


class Player(BaseModel):
    """Player profile from the /players/{tag} endpoint."""

    club: ClubIdentifier
    three_vs_three_victories: int = Field(..., alias="3vs3Victories")
    is_qualified_from_championship_challenge: bool = Field(
        ..., alias="isQualifiedFromChampionshipChallenge"
    )
    icon: Icon
    tag: str
    name: str
    trophies: int
    exp_level: int = Field(..., alias="expLevel")
    exp_points: int = Field(..., alias="expPoints")
    highest_trophies: int = Field(..., alias="highestTrophies")
    solo_victories: int = Field(..., alias="soloVictories")
    duo_victories: int = Field(..., alias="duoVictories")
    best_robo_rumble_time: int = Field(..., alias="bestRoboRumbleTime")
    best_time_as_big_brawler: int = Field(..., alias="bestTimeAsBigBrawler")
    brawlers: list[BrawlerStat]
    name_color: str = Field(..., alias="nameColor")

    model_config = _DTO_CONFIG

    @property
    def in_club(self) -> bool:
        """Whether the profile references a club."""
        return self.club.tag is not None

    def get_brawler(self, brawler_id: int) -> BrawlerStat | None:
        """Get the player's stats for a brawler by id."""
        for brawler in self.brawlers:
            if brawler.id == brawler_id:
                return brawler
        return None


class ClubMember(BaseModel):
    icon: Icon
    tag: str
    name: str
    trophies: int
    role: ClubMemberRole
    name_color: str = Field(..., alias="nameColor")

    model_config = _DTO_CONFIG


class Club(BaseModel):
    """Club details from the /clubs/{tag} endpoint."""

    tag: str
    name: str
    description: str
    trophies: int
    required_trophies: int = Field(..., alias="requiredTrophies")
    members: list[ClubMember]
    type: ClubType
    badge_id: int = Field(..., alias="badgeId")

    model_config = _DTO_CONFIG


class BrawlerDefinition(BaseModel):
    """Catalog entry for a brawler, independent of any player."""

    gadgets: list[Gadget]
    name: JsonValue
    id: int
    star_powers: list[StarPower] = Field(..., alias="starPowers")

    model_config = _DTO_CONFIG


class EventDetails(BaseModel):
    mode: str
    id: int
    map: JsonValue

    model_config = _DTO_CONFIG


class Battle(BaseModel):
    """Battle log entry.

    battle_time uses the API's compact format (e.g. 20240101T120000.000Z) and is
    kept as sent.
    """

    battle_time: str = Field(..., alias="battleTime")
    event: EventDetails
    battle: JsonValue

    model_config = _DTO_CONFIG


class PlayerRankingClub(BaseModel):
    """Club reference in a ranking entry, empty when the player has no club."""

    name: str | None = None

    model_config = _DTO_CONFIG


class PlayerRanking(BaseModel):
    club: PlayerRankingClub
    trophies: int
    icon: Icon
    tag: str
    name: str
    rank: int
    name_color: str = Field(..., alias="nameColor")

    model_config = _DTO_CONFIG


class ClubRanking(BaseModel):
    tag: str
    name: str
    trophies: int
    rank: int
    member_count: int = Field(..., alias="memberCount")
    badge_id: int = Field(..., alias="badgeId")

    model_config = _DTO_CONFIG


class ScheduledEventDetails(BaseModel):
    mode: str
    modifiers: list[str] | None = None
    id: int
    map: JsonValue

    model_config = _DTO_CONFIG


class ScheduledEvent(BaseModel):
    """A slot in the event rotation."""

    event: ScheduledEventDetails
    slot_id: int = Field(..., alias="slotId")
    start_time: str = Field(..., alias="startTime")
    end_time: str = Field(..., alias="endTime")

    model_config = _DTO_CONFIG


# Paging


class PagingCursors(BaseModel):
    """Opaque cursors pointing at the adjacent pages of a list."""

    before: str | None = None
    after: str | None = None

    model_config = _DTO_CONFIG


class PagingOptions(BaseModel):
    """Optional pagination parameters accepted by list endpoints."""

    limit: int | None = None
    after: str | None = None
    before: str | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    def to_params(self) -> dict[str, object]:
        """Query parameters for the set fields only."""
        return self.model_dump(exclude_none=True)


class BattleList(BaseModel):
    items: list[Battle]
    paging: PagingCursors = Field(default_factory=PagingCursors)

    model_config = _DTO_CONFIG


class ClubMemberList(BaseModel):
    items: list[ClubMember]
    paging: PagingCursors = Field(default_factory=PagingCursors)

    model_config = _DTO_CONFIG


class BrawlerList(BaseModel):
    items: list[BrawlerDefinition]
    paging: PagingCursors = Field(default_factory=PagingCursors)

    model_config = _DTO_CONFIG


class PlayerRankingList(BaseModel):
    items: list[PlayerRanking]
    paging: PagingCursors = Field(default_factory=PagingCursors)

    model_config = _DTO_CONFIG


class ClubRankingList(BaseModel):
    items: list[ClubRanking]
    paging: PagingCursors = Field(default_factory=PagingCursors)

    model_config = _DTO_CONFIG


class ScheduledEvents(BaseModel):
    """Current event rotation.

    The rotation endpoint returns a bare JSON array; it is wrapped as items.
    """

    items: list[ScheduledEvent]

    model_config = _DTO_CONFIG

    @model_validator(mode="before")
    @classmethod
    def wrap_bare_list(cls, data: Any) -> Any:
        if isinstance(data, list):
            return {"items": data}
        return data


# Errors


class ClientError(BaseModel):
    """Error envelope returned by the API with non-2xx responses."""

    reason: str | None = None
    message: str | None = None
    type: str | None = None
    detail: JsonValue = None

    model_config = _DTO_CONFIG
