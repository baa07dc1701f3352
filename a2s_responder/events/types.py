# a2s_responder/events/types.py
from dataclasses import dataclass
from typing import Optional, Tuple


# ------------------Запросы к источнику состояния игры------------------

@dataclass
class GetServerInfoQuery:
    pass


@dataclass
class GetPlayersQuery:
    pass


@dataclass
class GetRulesQuery:
    pass


@dataclass
class GetChallengeQuery:
    address: Optional[Tuple[str, int]] = None


# ------------------События------------------

@dataclass
class ResponseEncodedEvent:
    packet_type: str  # например, "A2S_INFO"
    size: int


@dataclass
class TransportErrorEvent:
    operation: str  # "recv" | "send" | "dispatch"
    error: str
    address: Optional[Tuple[str, int]] = None
