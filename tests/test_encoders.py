import struct

import pytest

from a2s_responder.constants import ResponseTag
from a2s_responder.config import Config
from a2s_responder.game_state.synthetic import SyntheticGameState
from a2s_responder.query_server.query_request import (
    PacketEncodingError, challenge_query, info_query, player_query, rules_query,
)
from a2s_responder.query_server.response_reader import parse_challenge, parse_info, parse_players, parse_rules
from a2s_responder.query_server.types import PlayerEntry, RuleEntry, ServerInfo

FLOAT_3_45 = struct.unpack('<f', struct.pack('<f', 3.45))[0]


def make_info(**overrides):
    fields = dict(
        protocol=17, name="Сервер №1", map="de_dust2", folder="cstrike", game="Counter-Strike",
        app_id=240, players=5, max_players=32, bots=2, server_type="d", environment="w",
        visibility=0, vac=1, version="1.2.3",
    )
    fields.update(overrides)
    return ServerInfo(**fields)


@pytest.fixture
def state():
    return SyntheticGameState(Config(data={}))


def test_every_response_starts_with_single_packet_header(state):
    packets = {
        ResponseTag.INFO: info_query(state.get_server_info()),
        ResponseTag.PLAYER: player_query(state.get_players()),
        ResponseTag.RULES: rules_query(state.get_rules()),
        ResponseTag.CHALLENGE: challenge_query(state.get_challenge()),
    }
    for tag, packet in packets.items():
        assert packet[:4] == b'\xFF\xFF\xFF\xFF'
        assert packet[4] == tag


def test_info_layout_matches_reference_bytes(state):
    expected = (
        b'\xFF\xFF\xFF\xFF' b'I' b'\x03'
        b'TestGameServer1\x00' b'MapA\x00' b'-\x00' b'TestGame\x00'
        b'\x01\x00'
        b'\x0a' b'\x40' b'\x00' b'd' b'l' b'\x01' b'\x00'
        b'1.0.1\x00'
    )
    assert info_query(state.get_server_info()) == expected


def test_info_decodes_to_the_encoded_values():
    info = make_info()
    packet = info_query(info)
    assert parse_info(packet) == info
    assert info_query(parse_info(packet)) == packet


def test_info_negative_app_id_is_signed():
    assert parse_info(info_query(make_info(app_id=-2))).app_id == -2


def test_synthetic_players(state):
    packet = player_query(state.get_players())
    assert packet[5] == 10
    players = parse_players(packet)
    assert len(players) == 10
    assert [p.index for p in players] == list(range(10))
    assert [p.name for p in players] == [f"player{i}" for i in range(10)]
    assert all(p.score == 32 for p in players)
    assert all(p.duration == FLOAT_3_45 for p in players)
    assert packet.endswith(struct.pack('<i', 32) + struct.pack('<f', 3.45))


def test_empty_player_list():
    assert player_query([]) == b'\xFF\xFF\xFF\xFFD\x00'


def test_synthetic_rules(state):
    packet = rules_query(state.get_rules())
    assert struct.unpack_from('<h', packet, 5)[0] == 16
    rules = parse_rules(packet)
    assert [(r.name, r.value) for r in rules] == [(f"rule{i}", f"value{i}") for i in range(16)]


def test_challenge(state):
    assert challenge_query(state.get_challenge()) == b'\xFF\xFF\xFF\xFFA\x01\x00\x00\x00'
    assert parse_challenge(challenge_query(-123456789)) == -123456789


def test_each_call_returns_a_fresh_packet(state):
    first = player_query(state.get_players())
    second = player_query(state.get_players())
    assert first == second
    assert first is not second


@pytest.mark.parametrize("overrides", [
    {"name": "bad\x00name"},
    {"version": "1.0\x00"},
    {"players": 256},
    {"bots": -1},
    {"app_id": 40000},
    {"server_type": "dd"},
    {"environment": "ж"},
])
def test_info_rejects_values_that_would_corrupt_the_frame(overrides):
    with pytest.raises(PacketEncodingError):
        info_query(make_info(**overrides))


def test_player_count_must_fit_in_a_byte():
    players = [PlayerEntry(index=i % 256, name="p", score=0, duration=0.0) for i in range(256)]
    with pytest.raises(PacketEncodingError):
        player_query(players)


def test_player_fields_are_validated():
    with pytest.raises(PacketEncodingError):
        player_query([PlayerEntry(index=0, name="p", score=2 ** 31, duration=0.0)])
    with pytest.raises(PacketEncodingError):
        player_query([PlayerEntry(index=0, name="\x00", score=0, duration=0.0)])


def test_rule_strings_are_validated():
    with pytest.raises(PacketEncodingError):
        rules_query([RuleEntry(name="sv_cheats", value="0\x001")])


def test_challenge_out_of_range():
    with pytest.raises(PacketEncodingError):
        challenge_query(2 ** 32)


def test_encoding_error_is_a_value_error():
    assert issubclass(PacketEncodingError, ValueError)
