# a2s_responder/constants.py
from enum import IntEnum

# Префикс одиночного (не разбитого на части) пакета A2S: int32 -1 в little-endian
SINGLE_PACKET_HEADER = b'\xFF\xFF\xFF\xFF'

# Байт кода запроса стоит сразу после префикса
OPCODE_OFFSET = len(SINGLE_PACKET_HEADER)


class Opcode(IntEnum):
    """Коды входящих запросов A2S."""
    UNKNOWN = -1  # Нераспознанный или слишком короткий запрос, на провод не попадает
    INFO = 0x54
    PLAYER = 0x55
    RULES = 0x56
    CHALLENGE = 0x57


class ResponseTag(IntEnum):
    """Тип ответа, записывается после префикса."""
    INFO = 0x49  # 'I'
    PLAYER = 0x44  # 'D'
    RULES = 0x45  # 'E'
    CHALLENGE = 0x41  # 'A'


# Имена пакетов для логов
PACKET_NAMES = {
    Opcode.INFO: "A2S_INFO",
    Opcode.PLAYER: "A2S_PLAYER",
    Opcode.RULES: "A2S_RULES",
    Opcode.CHALLENGE: "A2S_SERVERQUERY_GETCHALLENGE",
}

DEFAULT_SERVER_IP = "0.0.0.0"
DEFAULT_QUERY_PORT = 3333

# Границы полей
MAX_BYTE = 0xFF
MAX_PLAYERS_IN_PACKET = MAX_BYTE
MAX_RULES_IN_PACKET = 0x7FFF
