# a2s_responder/query_server/query_request/challenge_query.py
from a2s_responder.constants import ResponseTag
from a2s_responder.query_server.query_request.packet import header, pack_long


def challenge_query(challenge_number: int) -> bytes:
    """
    Формирует ответ на A2S_SERVERQUERY_GETCHALLENGE.
    """
    return header(ResponseTag.CHALLENGE) + pack_long(challenge_number, "challenge")
