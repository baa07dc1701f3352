# a2s_responder/query_server/query_request/rules_query.py
from typing import Sequence

from a2s_responder.constants import MAX_RULES_IN_PACKET, ResponseTag
from a2s_responder.query_server.query_request.packet import (
    PacketEncodingError, header, pack_short, pack_string,
)
from a2s_responder.query_server.types import RuleEntry


def rules_query(rules: Sequence[RuleEntry]) -> bytes:
    """Формирует ответ на A2S_RULES: int16 количество, затем пары имя/значение."""
    if len(rules) > MAX_RULES_IN_PACKET:
        raise PacketEncodingError(f"Слишком много правил: {len(rules)} > {MAX_RULES_IN_PACKET}")

    response = header(ResponseTag.RULES) + pack_short(len(rules), "count")

    for rule in rules:
        response += pack_string(rule.name, "rule name")
        response += pack_string(rule.value, "rule value")

    return response
