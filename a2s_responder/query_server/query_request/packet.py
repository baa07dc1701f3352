# a2s_responder/query_server/query_request/packet.py
"""
Кирпичики для сборки ответов A2S.

Каждая функция возвращает новый объект bytes; ответ собирается конкатенацией,
общего изменяемого буфера нет. Все целые - little-endian.
"""
import struct

from a2s_responder.constants import SINGLE_PACKET_HEADER


class PacketEncodingError(ValueError):
    """Значение нельзя записать в пакет без порчи формата."""


def _pack(fmt, value, field):
    try:
        return struct.pack(fmt, value)
    except (struct.error, OverflowError) as e:
        raise PacketEncodingError(f"Поле {field}: значение {value!r} не помещается в формат {fmt!r} ({e})")


def header(tag) -> bytes:
    """Префикс одиночного пакета + байт типа ответа."""
    return SINGLE_PACKET_HEADER + pack_byte(tag, "tag")


def pack_byte(value, field="byte") -> bytes:
    if isinstance(value, bool):
        value = int(value)
    return _pack('<B', value, field)


def pack_short(value, field="short") -> bytes:
    return _pack('<h', value, field)


def pack_long(value, field="long") -> bytes:
    return _pack('<i', value, field)


def pack_float(value, field="float") -> bytes:
    return _pack('<f', value, field)


def pack_char(value, field="char") -> bytes:
    """Однобайтовый ASCII-символ (тип сервера, окружение)."""
    if not isinstance(value, str) or len(value) != 1 or ord(value) > 0x7F:
        raise PacketEncodingError(f"Поле {field}: ожидался один ASCII-символ, получено {value!r}")
    return value.encode('ascii')


def pack_string(value, field="string") -> bytes:
    """UTF-8 строка с завершающим нулём. Нуль внутри строки сломал бы разбор пакета."""
    if not isinstance(value, str):
        raise PacketEncodingError(f"Поле {field}: ожидалась строка, получено {type(value).__name__}")
    if '\x00' in value:
        raise PacketEncodingError(f"Поле {field}: строка содержит нулевой байт: {value!r}")
    try:
        encoded = value.encode('utf-8')
    except UnicodeEncodeError as e:
        raise PacketEncodingError(f"Поле {field}: строка не кодируется в UTF-8 ({e})")
    return encoded + b'\x00'
