# a2s_responder/query_server/response_reader.py
"""
Разбор ответов A2S обратно в структуры данных.
Используется командой `query` и тестами.
"""
import struct

from a2s_responder.constants import OPCODE_OFFSET, SINGLE_PACKET_HEADER, ResponseTag
from a2s_responder.query_server.types import PlayerEntry, RuleEntry, ServerInfo


class ResponseReader:
    """Последовательное чтение полей из пакета."""

    def __init__(self, data: bytes, offset: int = 0):
        self.data = data
        self.offset = offset

    def _unpack(self, fmt):
        size = struct.calcsize(fmt)
        if self.offset + size > len(self.data):
            raise ValueError(f"Пакет обрывается на смещении {self.offset}")
        value = struct.unpack_from(fmt, self.data, self.offset)[0]
        self.offset += size
        return value

    def byte(self):
        return self._unpack('<B')

    def short(self):
        return self._unpack('<h')

    def long(self):
        return self._unpack('<i')

    def float(self):
        return self._unpack('<f')

    def char(self):
        return chr(self.byte())

    def string(self):
        end = self.data.find(b'\x00', self.offset)
        if end == -1:
            raise ValueError(f"Нет завершающего нуля у строки со смещения {self.offset}")
        value = self.data[self.offset:end].decode('utf-8')
        self.offset = end + 1
        return value


def read_header(data: bytes, expected_tag: ResponseTag) -> ResponseReader:
    """Проверяет префикс одиночного пакета и тип ответа, возвращает читатель тела."""
    if len(data) <= OPCODE_OFFSET or data[:OPCODE_OFFSET] != SINGLE_PACKET_HEADER:
        raise ValueError("Пакет не является одиночным ответом A2S")
    if data[OPCODE_OFFSET] != expected_tag:
        raise ValueError(f"Ожидался тип ответа {expected_tag.value:#04x}, получен {data[OPCODE_OFFSET]:#04x}")
    return ResponseReader(data, OPCODE_OFFSET + 1)


def parse_info(data: bytes) -> ServerInfo:
    reader = read_header(data, ResponseTag.INFO)
    return ServerInfo(
        protocol=reader.byte(),
        name=reader.string(),
        map=reader.string(),
        folder=reader.string(),
        game=reader.string(),
        app_id=reader.short(),
        players=reader.byte(),
        max_players=reader.byte(),
        bots=reader.byte(),
        server_type=reader.char(),
        environment=reader.char(),
        visibility=reader.byte(),
        vac=reader.byte(),
        version=reader.string(),
    )


def parse_players(data: bytes):
    reader = read_header(data, ResponseTag.PLAYER)
    count = reader.byte()
    players = []
    for _ in range(count):
        players.append(PlayerEntry(
            index=reader.byte(),
            name=reader.string(),
            score=reader.long(),
            duration=reader.float(),
        ))
    return players


def parse_rules(data: bytes):
    reader = read_header(data, ResponseTag.RULES)
    count = reader.short()
    return [RuleEntry(name=reader.string(), value=reader.string()) for _ in range(count)]


def parse_challenge(data: bytes) -> int:
    return read_header(data, ResponseTag.CHALLENGE).long()
