"""
Game Service

Contains the single player Wordle game logic.
"""

import logging
import random
import uuid
from typing import Optional, Tuple

from ..config.game_settings import MAX_ROUNDS
from ..exceptions import InvalidSettings, SessionTerminal
from ..models.dictionary import Dictionary
from ..models.game import GameOutcome, GameSession, GameState, GuessRecord, LetterVerdict
from .evaluator import evaluate_guess, normalize_guess, update_letter_status
from .store import SessionStore

logger = logging.getLogger('wordle_game.games')

WIN_MESSAGE = "Congratulations! You won!"
LOSS_MESSAGE = "Game over! Better luck next time."


class GameService:
    """
    Core game service managing multiple single player sessions.

    This class handles:
    - Game session management with unique game IDs
    - Word selection and secure answer storage
    - Guess validation and evaluation
    - Game state snapshots that hide the answer until the game is over
    """

    def __init__(self, dictionary: Dictionary, rng=None, default_max_rounds: int = MAX_ROUNDS):
        self.dictionary = dictionary
        self.rng = rng or random.Random()
        self.default_max_rounds = default_max_rounds
        self.games = SessionStore()

    def create_new_game(self, max_rounds: Optional[int] = None) -> str:
        """
        Creates a new game session with a randomly selected word.

        Args:
            max_rounds: Guess limit for this game, defaults to the configured limit

        Returns:
            str: Unique game ID for this session
        """
        if max_rounds is None:
            max_rounds = self.default_max_rounds
        if isinstance(max_rounds, bool) or not isinstance(max_rounds, int) or max_rounds < 1:
            raise InvalidSettings("max_rounds must be a positive integer")

        game_id = str(uuid.uuid4())
        session = GameSession(
            game_id=game_id,
            target_word=self.dictionary.random_word(self.rng),
            max_rounds=max_rounds,
        )
        self.games.add(game_id, session)
        logger.info("Created game %s (max_rounds=%d)", game_id, max_rounds)
        return game_id

    def get_game_state(self, game_id: str) -> GameState:
        """
        Returns the current game state for a session.

        Raises:
            SessionNotFound: If the game does not exist
        """
        with self.games.locked(game_id) as session:
            return self._snapshot(session)

    def make_guess(self, game_id: str, raw_guess) -> Tuple[Tuple[LetterVerdict, ...], GameState]:
        """
        Processes a guess and updates game state.

        Nothing is mutated unless every check passes.

        Returns:
            The verdicts for this guess and the updated game state

        Raises:
            SessionNotFound, SessionTerminal, InvalidFormat, UnknownWord
        """
        with self.games.locked(game_id) as session:
            if session.game_over:
                raise SessionTerminal()

            guess = normalize_guess(raw_guess, self.dictionary)
            verdicts = evaluate_guess(session.target_word, guess)

            session.history.append(GuessRecord(guess, verdicts))
            update_letter_status(session.letter_status, verdicts)

            if guess == session.target_word:
                session.outcome = GameOutcome.WON
                logger.info("Game %s won in %d round(s)", game_id, session.rounds_used)
            elif session.rounds_used >= session.max_rounds:
                session.outcome = GameOutcome.LOST
                logger.info("Game %s lost after %d round(s)", game_id, session.rounds_used)

            return verdicts, self._snapshot(session)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory. Deleting an unknown game is not an error.

        Returns:
            bool: True if a game was deleted, False if it did not exist
        """
        deleted = self.games.remove(game_id)
        if deleted:
            logger.info("Deleted game %s", game_id)
        return deleted

    @staticmethod
    def _snapshot(session: GameSession) -> GameState:
        answer = None
        message = None
        if session.game_over:
            answer = session.target_word
            message = WIN_MESSAGE if session.outcome is GameOutcome.WON else LOSS_MESSAGE

        return GameState(
            game_id=session.game_id,
            current_round=session.rounds_used,
            max_rounds=session.max_rounds,
            outcome=session.outcome.value,
            game_over=session.game_over,
            won=session.outcome is GameOutcome.WON,
            guesses=[record.guess for record in session.history],
            guess_results=[record.results() for record in session.history],
            letter_status=dict(session.letter_status),
            answer=answer,
            message=message
        )
