# a2s_responder/game_state/synthetic.py

from a2s_responder.events.types import GetChallengeQuery, GetPlayersQuery, GetRulesQuery, GetServerInfoQuery
from a2s_responder.query_server.types import PlayerEntry, RuleEntry, ServerInfo


class SyntheticGameState:
    """
    Статический источник состояния игры: имя сервера и параметры берутся из конфига,
    игроки и правила генерируются (player0..playerN, rule0/value0..).
    Реальный источник регистрирует у медиатора свои обработчики тех же запросов.
    """

    def __init__(self, config):
        self.config = config
        self.player_count = config.get("SYNTHETIC.PLAYER_COUNT", 10)
        self.rule_count = config.get("SYNTHETIC.RULE_COUNT", 16)
        self.player_score = config.get("SYNTHETIC.PLAYER_SCORE", 32)
        self.player_duration = config.get("SYNTHETIC.PLAYER_DURATION", 3.45)
        self.challenge_number = config.get("SYNTHETIC.CHALLENGE", 1)

    def register(self, mediator):
        """Регистрирует обработчики запросов состояния у медиатора."""
        mediator.register_handler(GetServerInfoQuery, self.get_server_info)
        mediator.register_handler(GetPlayersQuery, self.get_players)
        mediator.register_handler(GetRulesQuery, self.get_rules)
        mediator.register_handler(GetChallengeQuery, self.get_challenge)
        return self

    def get_server_info(self, query=None) -> ServerInfo:
        get = self.config.get
        return ServerInfo(
            protocol=get("SERVER.PROTOCOL", 3),
            name=get("SERVER.NAME", "TestGameServer1"),
            map=get("SERVER.MAP", "MapA"),
            folder=get("SERVER.FOLDER", "-"),
            game=get("SERVER.GAME", "TestGame"),
            app_id=get("SERVER.APP_ID", 1),
            players=self.player_count,
            max_players=get("SERVER.MAX_PLAYERS", 64),
            bots=get("SERVER.BOTS", 0),
            server_type=get("SERVER.SERVER_TYPE", "d"),
            environment=get("SERVER.ENVIRONMENT", "l"),
            visibility=get("SERVER.VISIBILITY", 1),
            vac=get("SERVER.VAC", 0),
            version=get("SERVER.VERSION", "1.0.1"),
        )

    def get_players(self, query=None):
        return [
            PlayerEntry(index=i, name=f"player{i}", score=self.player_score, duration=self.player_duration)
            for i in range(self.player_count)
        ]

    def get_rules(self, query=None):
        return [RuleEntry(name=f"rule{i}", value=f"value{i}") for i in range(self.rule_count)]

    def get_challenge(self, query=None) -> int:
        return self.challenge_number
