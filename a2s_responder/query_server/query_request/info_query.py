# a2s_responder/query_server/query_request/info_query.py
from a2s_responder.constants import ResponseTag
from a2s_responder.query_server.query_request.packet import (
    header, pack_byte, pack_char, pack_short, pack_string,
)
from a2s_responder.query_server.types import ServerInfo


def info_query(info: ServerInfo) -> bytes:
    """
    Формирует ответ на A2S_INFO.
    :param info: Описание сервера.
    :return: Готовый к отправке пакет.
    """
    response = (
            header(ResponseTag.INFO) +  # Префикс и тип ответа ('I')
            pack_byte(info.protocol, "protocol") +  # Версия протокола
            pack_string(info.name, "name") +  # Название сервера
            pack_string(info.map, "map") +  # Карта
            pack_string(info.folder, "folder") +  # Папка игры
            pack_string(info.game, "game") +  # Игра
            pack_short(info.app_id, "app_id") +  # ID игры
            pack_byte(info.players, "players") +  # Игроки (текущее количество)
            pack_byte(info.max_players, "max_players") +  # Максимум игроков
            pack_byte(info.bots, "bots") +  # Боты
            pack_char(info.server_type, "server_type") +  # Тип сервера
            pack_char(info.environment, "environment") +  # Платформа
            pack_byte(info.visibility, "visibility") +  # Пароль
            pack_byte(info.vac, "vac") +  # VAC
            pack_string(info.version, "version")  # Версия игры
    )
    return response
