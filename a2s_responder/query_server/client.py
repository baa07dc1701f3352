# a2s_responder/query_server/client.py
import asyncio

import asyncio_dgram
from a2s_responder.constants import SINGLE_PACKET_HEADER, Opcode
from a2s_responder.query_server import response_reader

# Тела запросов, как их отправляют игровые клиенты
REQUEST_PAYLOADS = {
    Opcode.INFO: b'Source Engine Query\x00',
    Opcode.PLAYER: b'\xFF\xFF\xFF\xFF',  # challenge -1: запросить challenge
    Opcode.RULES: b'\xFF\xFF\xFF\xFF',
    Opcode.CHALLENGE: b'',
}

RESPONSE_PARSERS = {
    Opcode.INFO: response_reader.parse_info,
    Opcode.PLAYER: response_reader.parse_players,
    Opcode.RULES: response_reader.parse_rules,
    Opcode.CHALLENGE: response_reader.parse_challenge,
}


def build_request(opcode: Opcode) -> bytes:
    return SINGLE_PACKET_HEADER + bytes([opcode]) + REQUEST_PAYLOADS[opcode]


async def send_raw(host, port, data: bytes, timeout=5.0) -> bytes:
    """Отправляет один датаграмм и ждёт один ответ."""
    stream = await asyncio_dgram.connect((host, port))
    try:
        await stream.send(data)
        response, _ = await asyncio.wait_for(stream.recv(), timeout)
        return response
    finally:
        stream.close()


async def query(host, port, opcode: Opcode, timeout=5.0):
    """
    Запрашивает у сервера ответ указанного типа и разбирает его.
    :return: ServerInfo, список PlayerEntry, список RuleEntry или int (challenge).
    """
    response = await send_raw(host, port, build_request(opcode), timeout)
    return RESPONSE_PARSERS[opcode](response)
