"""Schemas package."""

from brawl_stars_client.schemas.brawl_stars_api import (
    Battle,
    BattleList,
    BrawlerDefinition,
    BrawlerList,
    BrawlerStat,
    ClientError,
    Club,
    ClubIdentifier,
    ClubMember,
    ClubMemberList,
    ClubMemberRole,
    ClubRanking,
    ClubRankingList,
    ClubType,
    EventDetails,
    Gadget,
    Gear,
    Icon,
    PagingCursors,
    PagingOptions,
    Player,
    PlayerRanking,
    PlayerRankingClub,
    PlayerRankingList,
    ScheduledEvent,
    ScheduledEventDetails,
    ScheduledEvents,
    StarPower,
)

__all__ = [
    "Battle",
    "BattleList",
    "BrawlerDefinition",
    "BrawlerList",
    "BrawlerStat",
    "ClientError",
    "Club",
    "ClubIdentifier",
    "ClubMember",
    "ClubMemberList",
    "ClubMemberRole",
    "ClubRanking",
    "ClubRankingList",
    "ClubType",
    "EventDetails",
    "Gadget",
    "Gear",
    "Icon",
    "PagingCursors",
    "PagingOptions",
    "Player",
    "PlayerRanking",
    "PlayerRankingClub",
    "PlayerRankingList",
    "ScheduledEvent",
    "ScheduledEventDetails",
    "ScheduledEvents",
    "StarPower",
]
