import os
import sys

import pytest

# Ensure the project root (containing the `wordle_server` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from wordle_server import create_app
from wordle_server.config import TestingConfig
from wordle_server.models.dictionary import Dictionary
from wordle_server.services.game_service import GameService
from wordle_server.services.lobby_service import LobbyService

WORDS = ['CRANE', 'SLATE', 'SPEED', 'ERASE', 'ABBEY', 'KEBAB', 'LLAMA', 'HELLO']


class FixedChoice:
    """Random source that always draws ``word``; change it between rounds."""

    def __init__(self, word):
        self.word = word

    def choice(self, seq):
        assert self.word in seq
        return self.word


@pytest.fixture()
def dictionary():
    return Dictionary.from_words(WORDS)


@pytest.fixture()
def rng():
    return FixedChoice('CRANE')


@pytest.fixture()
def game_service(dictionary, rng):
    return GameService(dictionary, rng)


@pytest.fixture()
def lobby_service(dictionary, rng):
    return LobbyService(dictionary, rng)


@pytest.fixture()
def flask_app(dictionary, rng):
    application, _ = create_app(TestingConfig, dictionary=dictionary, rng=rng)
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = flask_app.socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client()
    )
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()
