# a2s_responder/query_server/types.py
from dataclasses import dataclass


@dataclass(frozen=True)
class ServerInfo:
    """Содержимое ответа A2S_INFO."""
    protocol: int
    name: str
    map: str
    folder: str
    game: str
    app_id: int
    players: int
    max_players: int
    bots: int
    server_type: str  # 'd' - dedicated, 'l' - non-dedicated, 'p' - SourceTV
    environment: str  # 'l' - Linux, 'w' - Windows, 'm'/'o' - Mac
    visibility: int  # 0 - публичный, 1 - с паролем
    vac: int  # 0 - выключен, 1 - включен
    version: str


@dataclass(frozen=True)
class PlayerEntry:
    index: int
    name: str
    score: int
    duration: float  # Время на сервере в секундах


@dataclass(frozen=True)
class RuleEntry:
    name: str
    value: str
