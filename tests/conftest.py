import copy

import pytest

from a2s_responder.config import Config
from a2s_responder.game_state.synthetic import SyntheticGameState
from a2s_responder.mediator.mediator import Mediator
from a2s_responder.query_server.dispatcher import Dispatcher

CONFIG_DATA = {
    "SERVER_IP": "127.0.0.1",
    "QUERY_PORT": 0,
    "QUERY": {"ECHO_UNKNOWN": True},
    "SERVER": {
        "PROTOCOL": 3,
        "NAME": "TestGameServer1",
        "MAP": "MapA",
        "FOLDER": "-",
        "GAME": "TestGame",
        "APP_ID": 1,
        "MAX_PLAYERS": 64,
        "BOTS": 0,
        "SERVER_TYPE": "d",
        "ENVIRONMENT": "l",
        "VISIBILITY": 1,
        "VAC": 0,
        "VERSION": "1.0.1",
    },
}


@pytest.fixture
def config():
    return Config(data=copy.deepcopy(CONFIG_DATA))


@pytest.fixture
def mediator(config):
    mediator = Mediator(config)
    SyntheticGameState(config).register(mediator)
    return mediator


@pytest.fixture
def dispatcher(mediator):
    return Dispatcher(mediator)
