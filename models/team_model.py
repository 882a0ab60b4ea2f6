"""
Data models for a team and a player detail record.

Both are frozen: the sections only read them. `from_api` keeps the
display fallbacks out of the views that build on them: the badge falls back
through `strTeamBadge` → `strBadge`, the description through Spanish →
English, and so on. Empty strings mean "not provided".
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping


def _s(raw: Mapping[str, Any], *keys: str) -> str:
    for k in keys:
        val = raw.get(k)
        if val is not None and str(val).strip():
            return str(val).strip()
    return ""


@dataclass(frozen=True)
class Team:
    id: str
    name: str
    short_name: str
    badge: str
    banner: str
    league: str
    country: str
    formed_year: str
    description: str
    stadium: str
    stadium_thumb: str
    stadium_location: str
    stadium_capacity: str
    stadium_description: str
    kit: str
    fanart: str
    socials: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> "Team":
        return cls(
            id=_s(raw, "idTeam"),
            name=_s(raw, "strTeam"),
            short_name=_s(raw, "strTeamShort"),
            badge=_s(raw, "strBadge", "strTeamBadge"),
            banner=_s(raw, "strBanner", "strTeamBanner"),
            league=_s(raw, "strLeague"),
            country=_s(raw, "strCountry"),
            formed_year=_s(raw, "intFormedYear"),
            description=_s(raw, "strDescriptionES", "strDescriptionEN"),
            stadium=_s(raw, "strStadium"),
            stadium_thumb=_s(raw, "strStadiumThumb"),
            stadium_location=_s(raw, "strStadiumLocation"),
            stadium_capacity=_s(raw, "intStadiumCapacity"),
            stadium_description=_s(raw, "strStadiumDescription"),
            kit=_s(raw, "strEquipment", "strTeamJersey"),
            fanart=_s(raw, "strFanart4"),
            socials={
                "Web": _s(raw, "strWebsite"),
                "Facebook": _s(raw, "strFacebook"),
                "Twitter": _s(raw, "strTwitter"),
                "Instagram": _s(raw, "strInstagram"),
                "YouTube": _s(raw, "strYoutube"),
            },
        )


@dataclass(frozen=True)
class Player:
    id: str
    name: str
    team_id: str
    team: str
    position: str
    number: str
    nationality: str
    born: str
    birth_location: str
    height: str
    weight: str
    description: str
    image: str
    banner: str
    socials: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> "Player":
        return cls(
            id=_s(raw, "idPlayer"),
            name=_s(raw, "strPlayer"),
            team_id=_s(raw, "idTeam"),
            team=_s(raw, "strTeam"),
            position=_s(raw, "strPosition"),
            number=_s(raw, "strNumber"),
            nationality=_s(raw, "strNationality"),
            born=_s(raw, "dateBorn"),
            birth_location=_s(raw, "strBirthLocation"),
            height=_s(raw, "strHeight"),
            weight=_s(raw, "strWeight"),
            description=_s(raw, "strDescriptionEN"),
            image=_s(raw, "strCutout", "strThumb"),
            banner=_s(raw, "strBanner", "strFanart1"),
            socials={
                "Facebook": _s(raw, "strFacebook"),
                "Twitter": _s(raw, "strTwitter"),
                "Instagram": _s(raw, "strInstagram"),
            },
        )

    @property
    def has_socials(self) -> bool:
        return any(self.socials.values())
