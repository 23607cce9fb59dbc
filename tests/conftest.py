import random

import pytest

from nulldle import create_app
from nulldle.config import TestingConfig
from nulldle.services.dictionary import Dictionary
from nulldle.services.game_service import initialize_game_service
from nulldle.services.kv_store import InMemoryKeyValueStore
from nulldle.services.stats_service import StatsService, initialize_stats_service

WORDS = [
    'house', 'world', 'would', 'apple', 'mouse', 'horse', 'route',
    'those', 'whose', 'noise', 'crane', 'sleep', 'eerie', 'lever',
]


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, start=1_000_000):
        self.now = start

    def advance(self, millis):
        self.now += millis

    def __call__(self):
        return self.now


@pytest.fixture()
def dictionary():
    return Dictionary.from_words(WORDS, rng=random.Random(7))


@pytest.fixture()
def kv_store():
    return InMemoryKeyValueStore()


@pytest.fixture()
def stats_service(kv_store):
    return StatsService(kv_store)


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def flask_app(dictionary):
    stats = initialize_stats_service(InMemoryKeyValueStore())
    initialize_game_service(dictionary, stats)
    application, socketio = create_app(TestingConfig)
    yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app, client):
    test_client = flask_app.socketio.test_client(flask_app, flask_test_client=client)
    yield test_client
    if test_client.is_connected():
        test_client.disconnect()
