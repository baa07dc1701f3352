# a2s_responder/mediator/mediator.py

from collections import defaultdict
from a2s_responder.logger import LoggerMixin


class Mediator(LoggerMixin):
    """
    Связывает компоненты: реестр обработчиков запросов (request/response)
    и подписчиков на события (subscribe/notify).
    """

    def __init__(self, config=None, logger=None):
        super().__init__(logger=logger)
        self.config = config
        self._event_handlers = defaultdict(list)
        self._request_handlers = {}

    def subscribe(self, event_type, handler):
        self.logger.debug(f"Подписываем обработчик {handler.__name__} на событие {event_type.__name__}")
        self._event_handlers[event_type].append(handler)

    def notify(self, event):
        """
        Синхронно доставляет событие подписчикам.
        Ошибка подписчика логируется и не мешает остальным.
        """
        for handler in self._event_handlers[type(event)]:
            try:
                handler(event)
            except Exception as e:
                self.logger.error(f"Обработчик {handler.__name__} упал на событии {type(event).__name__}: {e}")

    def register_handler(self, request_type, handler):
        self.logger.debug(f"Регистрируем обработчик {handler.__name__} для запроса {request_type.__name__}")
        self._request_handlers[request_type] = handler

    def request(self, query):
        handler = self._request_handlers.get(type(query))
        if not handler:
            self.logger.error(f"Нет обработчика для запроса {type(query).__name__}")
            raise ValueError('Нет подписки на этот запрос')
        return handler(query)
