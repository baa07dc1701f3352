from a2s_responder.query_server.query_request.packet import PacketEncodingError
from a2s_responder.query_server.query_request.info_query import info_query
from a2s_responder.query_server.query_request.player_query import player_query
from a2s_responder.query_server.query_request.rules_query import rules_query
from a2s_responder.query_server.query_request.challenge_query import challenge_query

__all__ = ["PacketEncodingError", "info_query", "player_query", "rules_query", "challenge_query"]
