"""
Game Exceptions

All expected engine failures live here so the transport layer can map
them to responses in one place. Every error carries a stable ``code``
for clients and a message that is safe to show to a player.
"""


class WordleError(Exception):
    """Base class for every expected game failure."""
    code = "WORDLE_ERROR"

    def __init__(self, message=None):
        super().__init__(message or self.default_message())

    @classmethod
    def default_message(cls) -> str:
        return "Request could not be processed"

    @property
    def message(self) -> str:
        return str(self)


# ============ Guess validation ============

class InvalidFormat(WordleError):
    """
    Guess is not exactly 5 letters A-Z after normalization.

    The default message covers the wrong length; non-letters get their own.
    """
    code = "INVALID_FORMAT"

    @classmethod
    def default_message(cls):
        return "Your guess must be exactly 5 letters long."


class UnknownWord(WordleError):
    """Guess is well formed but not in the dictionary."""
    code = "WORD_NOT_FOUND"

    def __init__(self, word):
        self.word = word
        super().__init__(f"The word '{word}' is not in our dictionary. Please try another word.")


# ============ Lookups ============

class NotFound(WordleError):
    code = "NOT_FOUND"
    kind = "Entity"

    def __init__(self, entity_id):
        self.entity_id = entity_id
        super().__init__(f"{self.kind} {entity_id} not found")


class SessionNotFound(NotFound):
    code = "GAME_NOT_FOUND"
    kind = "Game"


class RoomNotFound(NotFound):
    code = "ROOM_NOT_FOUND"
    kind = "Room"


class PlayerNotFound(NotFound):
    code = "PLAYER_NOT_FOUND"
    kind = "Player"


# ============ State machine violations ============

class SessionTerminal(WordleError):
    """Single-player game already won or lost."""
    code = "GAME_OVER"

    @classmethod
    def default_message(cls):
        return "Game is already over"


class RoomNotInProgress(WordleError):
    code = "ROOM_NOT_IN_PROGRESS"

    @classmethod
    def default_message(cls):
        return "Game not in progress"


class PlayerFinished(WordleError):
    """Player already won or used every round."""
    code = "PLAYER_FINISHED"

    @classmethod
    def default_message(cls):
        return "Player already finished"


class RoomFull(WordleError):
    code = "ROOM_FULL"

    @classmethod
    def default_message(cls):
        return "Room is full"


class RoomNotWaiting(WordleError):
    code = "ROOM_NOT_WAITING"

    @classmethod
    def default_message(cls):
        return "Game already in progress"


class CannotStart(WordleError):
    code = "CANNOT_START"

    @classmethod
    def default_message(cls):
        return "Cannot start game"


class InvalidSettings(WordleError):
    """Out-of-range max rounds or room capacity."""
    code = "INVALID_SETTINGS"


# ============ Startup ============

class EmptyDictionary(WordleError):
    """No usable 5-letter word survived loading. Fatal at startup."""
    code = "EMPTY_DICTIONARY"

    @classmethod
    def default_message(cls):
        return "Word list is empty or contains no 5-letter words"


# ============ Transport ============

class InvalidRequest(WordleError):
    """Request body is missing a required field."""
    code = "INVALID_REQUEST"

    def __init__(self, field_name):
        self.field_name = field_name
        super().__init__(f"'{field_name}' is required")
