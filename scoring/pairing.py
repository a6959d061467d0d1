"""Random head-to-head pairings for an event."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional

from models import Course, Event, Match, MatchPlayer, Player
from scoring.match import new_match_holes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PairingEntry:
    name: str
    team_name: str
    handicap: float


def event_entries(event: Event, players: Iterable[Player]) -> List[PairingEntry]:
    """Everyone entered on a team, with their cached playing handicap if set."""
    by_id = {p.id: p for p in players if p.id is not None}
    entries: List[PairingEntry] = []
    for team in event.teams:
        for member in team.members:
            player = by_id.get(member.player_id)
            if player is None:
                continue
            handicap = member.handicap if member.handicap is not None else player.handicap_index
            entries.append(PairingEntry(player.name, team.name, handicap))
    return entries


def random_pairings(
    entries: Iterable[PairingEntry],
    *,
    event_id: Optional[str] = None,
    tee_time: Optional[datetime] = None,
    course: Optional[Course] = None,
    rng: Optional[random.Random] = None,
) -> List[Match]:
    """Shuffle the field and pair each player with the next free opponent from another team."""
    rng = rng or random.Random()
    shuffled = list(entries)
    rng.shuffle(shuffled)

    matches: List[Match] = []
    used: set = set()
    for i, first in enumerate(shuffled):
        if first.name in used:
            continue
        opponent = next(
            (
                other for other in shuffled[i + 1:]
                if other.team_name != first.team_name and other.name not in used
            ),
            None,
        )
        if opponent is None:
            continue
        matches.append(
            Match(
                event_id=event_id,
                player1=MatchPlayer(name=first.name, team_name=first.team_name, handicap=first.handicap),
                player2=MatchPlayer(name=opponent.name, team_name=opponent.team_name, handicap=opponent.handicap),
                tee_time=tee_time,
                tee=1,
                holes=new_match_holes(course),
            )
        )
        used.update((first.name, opponent.name))

    unpaired = [e.name for e in shuffled if e.name not in used]
    if unpaired:
        logger.debug("No cross-team opponent left for: %s", ", ".join(unpaired))
    return matches
