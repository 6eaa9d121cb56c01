"""
Lobby Service

Manages multiplayer rooms: creation, joining, starting, guessing and the
end of a round.
"""

import logging
import random
import uuid
from datetime import datetime, timezone
from typing import List, Optional

from ..config.game_settings import DEFAULT_ROOM_CAPACITY, MIN_ROOM_CAPACITY
from ..exceptions import (
    CannotStart, InvalidSettings, PlayerFinished, PlayerNotFound, RoomFull, RoomNotFound,
    RoomNotInProgress, RoomNotWaiting
)
from ..models.dictionary import Dictionary
from ..models.game import GuessRecord
from ..models.room import Player, PlayerState, Room, RoomGuessResult, RoomState, RoomStatus
from .evaluator import evaluate_guess, normalize_guess, update_letter_status
from .ranking import rank_players
from .store import RoomStore

logger = logging.getLogger('wordle_game.lobby')


def _new_room_id() -> str:
    return uuid.uuid4().hex[:8].upper()


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


class LobbyService:
    """
    Multiplayer room manager.

    Every operation runs under the room's lock, so concurrent guesses in
    the same room cannot lose updates or end the round twice.
    """

    def __init__(self, dictionary: Dictionary, rng=None, default_capacity: int = DEFAULT_ROOM_CAPACITY):
        self.dictionary = dictionary
        self.rng = rng or random.Random()
        self.default_capacity = default_capacity
        self.rooms = RoomStore()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def create_room(self, creator_id: str, name: str, capacity: Optional[int] = None,
                    creator_name: Optional[str] = None) -> RoomState:
        """Create a WAITING room holding only its creator."""
        if capacity is None:
            capacity = self.default_capacity
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < MIN_ROOM_CAPACITY:
            raise InvalidSettings(f"Room capacity must be an integer of at least {MIN_ROOM_CAPACITY}")

        creator = Player(player_id=creator_id, display_name=creator_name or creator_id)

        while True:
            room = Room(
                room_id=_new_room_id(),
                name=name or f"{creator.display_name}'s room",
                creator_id=creator_id,
                capacity=capacity,
                players=[creator]
            )
            try:
                self.rooms.add(room.room_id, room)
                break
            except KeyError:
                logger.warning("Room id collision detected, regenerating: %s", room.room_id)

        logger.info("Created room %s (capacity=%d) by %s", room.room_id, capacity, creator_id)
        return self._room_state(room)

    def join_room(self, room_id: str, player_id: str, name: Optional[str] = None) -> RoomState:
        """
        Add a player to a WAITING room. Joining twice is a no-op.

        Raises:
            RoomNotFound, RoomFull, RoomNotWaiting
        """
        with self.rooms.locked(room_id) as room:
            if room.find_player(player_id) is not None:
                return self._room_state(room)
            if room.is_full():
                raise RoomFull()
            if room.status is not RoomStatus.WAITING:
                raise RoomNotWaiting()

            room.players.append(Player(player_id=player_id, display_name=name or player_id))
            logger.info("Player %s joined room %s (%d/%d)", player_id, room_id, len(room.players), room.capacity)
            return self._room_state(room)

    def leave_room(self, room_id: str, player_id: str) -> Optional[RoomState]:
        """
        Remove a player from a WAITING room.

        Returns:
            The updated room, or None if the last player left and the room was deleted
        """
        with self.rooms.locked(room_id) as room:
            if room.status is not RoomStatus.WAITING:
                raise RoomNotWaiting()
            player = room.find_player(player_id)
            if player is None:
                raise PlayerNotFound(player_id)

            room.players.remove(player)
            logger.info("Player %s left room %s", player_id, room_id)

            if not room.players:
                self.rooms.remove(room_id)
                logger.info("Room %s closed, no players left", room_id)
                return None

            if room.creator_id == player_id:
                room.creator_id = room.players[0].player_id
            return self._room_state(room)

    def start_room(self, room_id: str) -> RoomState:
        """
        Start the round in a WAITING room with at least two players.

        Raises:
            RoomNotFound, CannotStart
        """
        with self.rooms.locked(room_id) as room:
            if room.status is not RoomStatus.WAITING or len(room.players) < 2:
                raise CannotStart()
            self._begin_round(room)
            return self._room_state(room)

    def restart_room(self, room_id: str) -> RoomState:
        """
        Play again in a room that already started: fresh word, reset players.

        Raises:
            RoomNotFound, CannotStart
        """
        with self.rooms.locked(room_id) as room:
            if room.status is RoomStatus.WAITING or len(room.players) < 2:
                raise CannotStart()
            self._begin_round(room)
            return self._room_state(room)

    def _begin_round(self, room: Room):
        room.target_word = self.dictionary.random_word(self.rng)
        room.first_winner_id = None
        room.status = RoomStatus.IN_PROGRESS
        for player in room.players:
            player.reset()
        logger.info("Room %s started with %d players", room.room_id, len(room.players))

    # ------------------------------------------------------------------
    # Play
    # ------------------------------------------------------------------

    def submit_guess(self, room_id: str, player_id: str, raw_guess) -> RoomGuessResult:
        """
        Process a player's guess and end the round when appropriate.

        Returns:
            The verdicts, the player's own state and the room snapshot, all
            taken under the room lock, plus whether this guess ended the round

        Raises:
            RoomNotFound, RoomNotInProgress, PlayerNotFound, PlayerFinished,
            InvalidFormat, UnknownWord
        """
        with self.rooms.locked(room_id) as room:
            if room.status is not RoomStatus.IN_PROGRESS:
                raise RoomNotInProgress()
            player = room.find_player(player_id)
            if player is None:
                raise PlayerNotFound(player_id)
            if player.finished:
                raise PlayerFinished()

            guess = normalize_guess(raw_guess, self.dictionary)
            verdicts = evaluate_guess(room.target_word, guess)

            player.history.append(GuessRecord(guess, verdicts))
            update_letter_status(player.letter_status, verdicts)

            if guess == room.target_word:
                player.won = True
                player.win_timestamp = datetime.now(timezone.utc)
                if room.first_winner_id is None:
                    room.first_winner_id = player_id

            round_ended = room.round_over()
            if round_ended:
                self._finish_round(room)

            return RoomGuessResult(
                verdicts=verdicts,
                player=self._player_state(room, player, private=True),
                room=self._room_state(room),
                round_ended=round_ended
            )

    def _finish_round(self, room: Room):
        room.status = RoomStatus.FINISHED
        ranking = rank_players(room.players)
        logger.info(
            "Room %s finished, word %s, winner %s, ranking %s",
            room.room_id, room.target_word, room.first_winner_id,
            [player.player_id for player in ranking]
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_room_state(self, room_id: str) -> RoomState:
        with self.rooms.locked(room_id) as room:
            return self._room_state(room)

    def get_player_state(self, room_id: str, player_id: str) -> PlayerState:
        """A player's own view: guesses, verdicts and keyboard map."""
        with self.rooms.locked(room_id) as room:
            player = room.find_player(player_id)
            if player is None:
                raise PlayerNotFound(player_id)
            return self._player_state(room, player, private=True)

    def list_waiting_rooms(self) -> List[RoomState]:
        """Rooms still accepting players, oldest first."""
        waiting = []
        for room_id in self.rooms.ids():
            try:
                with self.rooms.locked(room_id) as room:
                    if room.status is RoomStatus.WAITING and not room.is_full():
                        waiting.append((room.created_at, self._room_state(room)))
            except RoomNotFound:
                continue  # closed while listing
        return [state for _, state in sorted(waiting, key=lambda item: item[0])]

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    @staticmethod
    def _player_state(room: Room, player: Player, private: bool = False) -> PlayerState:
        finished_room = room.status is RoomStatus.FINISHED
        state = PlayerState(
            player_id=player.player_id,
            display_name=player.display_name,
            rounds_used=player.rounds_used,
            finished=player.finished,
            won=player.won,
            win_timestamp=_isoformat(player.win_timestamp),
            rank=player.rank,
            points=player.points
        )
        if private or finished_room:
            state.guesses = [record.guess for record in player.history]
            state.guess_results = [record.results() for record in player.history]
        if private:
            state.letter_status = dict(player.letter_status)
            if finished_room:
                state.target_word = room.target_word
        return state

    def _room_state(self, room: Room) -> RoomState:
        finished_room = room.status is RoomStatus.FINISHED
        return RoomState(
            room_id=room.room_id,
            name=room.name,
            creator_id=room.creator_id,
            capacity=room.capacity,
            status=room.status.value,
            created_at=_isoformat(room.created_at),
            first_winner_id=room.first_winner_id,
            players=[self._player_state(room, player) for player in room.players],
            target_word=room.target_word if finished_room else None
        )
