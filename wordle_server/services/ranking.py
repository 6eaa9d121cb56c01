"""
Ranking

Final placement and points once a room's round ends.
"""

from typing import List, Sequence

from ..config.game_settings import points_for_rank
from ..models.room import Player


def _placement_key(player: Player):
    # Winners first, earliest win first; then fewest rounds used
    if player.won:
        return (0, player.win_timestamp)
    return (1, player.rounds_used)


def rank_players(players: Sequence[Player]) -> List[Player]:
    """
    Order players by placement and write ``rank`` and ``points`` back.

    Ties among non-winners with equal rounds used keep the given order,
    which for a room is join order.
    """
    ordered = sorted(players, key=_placement_key)
    for position, player in enumerate(ordered, start=1):
        player.rank = position
        player.points = points_for_rank(position)
    return ordered
