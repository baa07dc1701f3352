import pytest

from a2s_responder.constants import Opcode
from a2s_responder.events.types import GetServerInfoQuery, ResponseEncodedEvent
from a2s_responder.query_server.dispatcher import Dispatcher, parse_request
from a2s_responder.query_server.query_request import PacketEncodingError
from a2s_responder.query_server.response_reader import parse_challenge, parse_info, parse_players, parse_rules
from a2s_responder.query_server.types import ServerInfo

HEADER = b'\xFF\xFF\xFF\xFF'
KNOWN = {0x54, 0x55, 0x56, 0x57}


def test_parse_request_reads_opcode_at_offset_four():
    assert parse_request(HEADER + b'T').opcode is Opcode.INFO
    assert parse_request(HEADER + b'USomething').opcode is Opcode.PLAYER
    assert parse_request(HEADER + b'V').opcode is Opcode.RULES
    assert parse_request(HEADER + b'W').opcode is Opcode.CHALLENGE
    assert parse_request(HEADER + b'X').opcode is Opcode.UNKNOWN


def test_info_request(dispatcher):
    response = dispatcher.dispatch(HEADER + b'TSource Engine Query\x00')
    assert response[:5] == HEADER + b'I'
    assert parse_info(response).name == "TestGameServer1"


def test_player_request(dispatcher):
    players = parse_players(dispatcher.dispatch(HEADER + b'U\xFF\xFF\xFF\xFF'))
    assert [p.name for p in players] == [f"player{i}" for i in range(10)]


def test_rules_request(dispatcher):
    rules = parse_rules(dispatcher.dispatch(HEADER + b'V\xFF\xFF\xFF\xFF'))
    assert len(rules) == 16


def test_challenge_request(dispatcher):
    assert parse_challenge(dispatcher.dispatch(HEADER + b'W')) == 1


@pytest.mark.parametrize("opcode", [b for b in range(256) if b not in KNOWN])
def test_unknown_opcode_is_echoed(dispatcher, opcode):
    request = HEADER + bytes([opcode]) + b'payload'
    assert dispatcher.dispatch(request) == request


@pytest.mark.parametrize("request_bytes", [b'', b'\xFF', b'\xFF\xFF\xFF\xFF', b'TTTT'])
def test_short_request_is_echoed(dispatcher, request_bytes):
    assert parse_request(request_bytes).opcode is Opcode.UNKNOWN
    assert dispatcher.dispatch(request_bytes) == request_bytes


def test_opcode_is_read_regardless_of_prefix(dispatcher):
    response = dispatcher.dispatch(b'\x00\x00\x00\x00W')
    assert response[:5] == HEADER + b'A'


def test_unknown_opcode_dropped_when_echo_disabled(mediator):
    dispatcher = Dispatcher(mediator, echo_unknown=False)
    assert dispatcher.dispatch(HEADER + b'Z') is None
    assert dispatcher.dispatch(b'') is None
    assert dispatcher.dispatch(HEADER + b'W') is not None


def test_encoded_response_is_announced(mediator, dispatcher):
    events = []
    mediator.subscribe(ResponseEncodedEvent, events.append)

    response = dispatcher.dispatch(HEADER + b'T')
    dispatcher.dispatch(HEADER + b'Z')

    assert events == [ResponseEncodedEvent(packet_type="A2S_INFO", size=len(response))]


def test_pluggable_game_state(mediator, dispatcher):
    info = ServerInfo(
        protocol=17, name="Live", map="m", folder="f", game="g", app_id=0, players=0,
        max_players=8, bots=0, server_type="d", environment="l", visibility=0, vac=0, version="2",
    )
    mediator.register_handler(GetServerInfoQuery, lambda query: info)
    assert parse_info(dispatcher.dispatch(HEADER + b'T')) == info


def test_invalid_game_state_fails_fast(mediator, dispatcher):
    mediator.register_handler(GetServerInfoQuery, lambda query: ServerInfo(
        protocol=17, name="bad\x00", map="m", folder="f", game="g", app_id=0, players=0,
        max_players=8, bots=0, server_type="d", environment="l", visibility=0, vac=0, version="2",
    ))
    with pytest.raises(PacketEncodingError):
        dispatcher.dispatch(HEADER + b'T')
