# a2s_responder/query_server/query_request/player_query.py
from typing import Sequence

from a2s_responder.constants import MAX_PLAYERS_IN_PACKET, ResponseTag
from a2s_responder.query_server.query_request.packet import (
    PacketEncodingError, header, pack_byte, pack_float, pack_long, pack_string,
)
from a2s_responder.query_server.types import PlayerEntry


def player_query(players: Sequence[PlayerEntry]) -> bytes:
    """
    Формирует ответ на A2S_PLAYER.
    :param players: Список игроков в порядке вывода.
    :return: Байтовый ответ; счётчик всегда равен числу записанных игроков.
    """
    if len(players) > MAX_PLAYERS_IN_PACKET:
        raise PacketEncodingError(
            f"Слишком много игроков для одного пакета: {len(players)} > {MAX_PLAYERS_IN_PACKET}")

    response = header(ResponseTag.PLAYER) + pack_byte(len(players), "count")  # Количество игроков

    for player in players:
        response += pack_byte(player.index, "index")  # Индекс игрока
        response += pack_string(player.name, "name")  # Имя игрока (с завершающим нулем)
        response += pack_long(player.score, "score")  # Счет игрока
        response += pack_float(player.duration, "duration")  # Время игры

    return response
