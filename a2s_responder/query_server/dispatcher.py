# a2s_responder/query_server/dispatcher.py
from dataclasses import dataclass
from typing import Optional

from a2s_responder.constants import OPCODE_OFFSET, PACKET_NAMES, Opcode
from a2s_responder.events.types import (
    GetChallengeQuery, GetPlayersQuery, GetRulesQuery, GetServerInfoQuery, ResponseEncodedEvent,
)
from a2s_responder.logger import LoggerMixin
from a2s_responder.query_server.query_request import challenge_query, info_query, player_query, rules_query

_KNOWN_OPCODES = {opcode.value: opcode for opcode in Opcode if opcode is not Opcode.UNKNOWN}


@dataclass(frozen=True)
class QueryRequest:
    """Разобранный входящий датаграмм: код запроса и исходные байты."""
    opcode: Opcode
    data: bytes


def parse_request(data: bytes) -> QueryRequest:
    """
    Определяет тип запроса по байту со смещением 4.
    Короткий датаграмм (меньше 5 байт) и неизвестный код дают Opcode.UNKNOWN.
    """
    if len(data) <= OPCODE_OFFSET:
        return QueryRequest(Opcode.UNKNOWN, data)
    return QueryRequest(_KNOWN_OPCODES.get(data[OPCODE_OFFSET], Opcode.UNKNOWN), data)


class Dispatcher(LoggerMixin):
    """
    Выбирает кодировщик ответа по типу запроса.
    Данные для ответа берёт у медиатора (GetServerInfoQuery, GetPlayersQuery, ...),
    поэтому источник состояния игры подменяется регистрацией других обработчиков.
    """

    def __init__(self, mediator, echo_unknown=True, logger=None):
        """
        :param mediator: Медиатор с зарегистрированным источником состояния игры.
        :param echo_unknown: Отвечать на нераспознанный запрос его же байтами (True) или молчать (False).
        """
        super().__init__(logger=logger)
        self.mediator = mediator
        self.echo_unknown = echo_unknown

    def dispatch(self, data: bytes, addr=None) -> Optional[bytes]:
        """
        Возвращает ответ на датаграмм или None, если отвечать не нужно.
        :param data: Байты запроса.
        :param addr: Адрес отправителя (передаётся источнику challenge).
        """
        request = parse_request(bytes(data))

        if request.opcode is Opcode.INFO:
            response = info_query(self.mediator.request(GetServerInfoQuery()))
        elif request.opcode is Opcode.PLAYER:
            response = player_query(self.mediator.request(GetPlayersQuery()))
        elif request.opcode is Opcode.RULES:
            response = rules_query(self.mediator.request(GetRulesQuery()))
        elif request.opcode is Opcode.CHALLENGE:
            response = challenge_query(self.mediator.request(GetChallengeQuery(address=addr)))
        else:
            return self.handle_unknown(request)

        packet_type = PACKET_NAMES[request.opcode]
        self.logger.info(f"Returning {packet_type}")
        self.mediator.notify(ResponseEncodedEvent(packet_type=packet_type, size=len(response)))
        return response

    def handle_unknown(self, request: QueryRequest) -> Optional[bytes]:
        """Нераспознанный запрос: эхо исходных байт либо отказ от ответа."""
        if self.echo_unknown:
            self.logger.debug(f"Неизвестный запрос ({len(request.data)} байт), возвращаю его без изменений")
            return request.data
        self.logger.debug(f"Неизвестный запрос ({len(request.data)} байт) проигнорирован")
        return None
