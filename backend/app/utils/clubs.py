"""Registry of the clubs this site can be deployed for."""

from dataclasses import asdict, dataclass
from typing import Dict, Optional

DEFAULT_CLUB_ID = "swimdorval"


@dataclass(frozen=True)
class ClubConfig:
    id: str
    name: str
    title_prefix: str
    description: str

    def to_dict(self) -> dict:
        return asdict(self)


CLUBS: Dict[str, ClubConfig] = {
    "swimdorval": ClubConfig(
        id="swimdorval",
        name="Dorval Swim Club",
        title_prefix="Swim Dorval",
        description="Dorval Swim Club",
    ),
}


def get_club_config(club_id: Optional[str]) -> ClubConfig:
    if club_id and club_id in CLUBS:
        return CLUBS[club_id]
    return CLUBS[DEFAULT_CLUB_ID]
