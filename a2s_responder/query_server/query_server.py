# a2s_responder/query_server/query_server.py
import asyncio
from enum import Enum

import asyncio_dgram
from a2s_responder.events.types import TransportErrorEvent
from a2s_responder.logger import LoggerMixin


class ServerState(Enum):
    STOPPED = "stopped"
    RUNNING = "running"


class QueryServer(LoggerMixin):
    """
    UDP-сервер запросов A2S.

    Цикл: recv -> dispatch -> send -> recv. Следующий recv выполняется только после
    завершения send, поэтому у сервера одновременно не больше одной отправки.
    Ошибки транспорта сообщаются в логгер и медиатору (TransportErrorEvent) и не останавливают цикл.
    """

    def __init__(self, dispatcher, host="0.0.0.0", port=3333, logger=None, mediator=None):
        """
        :param dispatcher: Объект с методом dispatch(data, addr) -> bytes | None.
        :param host: Адрес для привязки.
        :param port: Порт (0 - выбрать свободный).
        :param mediator: Получатель событий об ошибках транспорта (необязательно).
        """
        super().__init__(logger=logger)
        self.dispatcher = dispatcher
        self.host = host
        self.port = port
        self.mediator = mediator
        self.state = ServerState.STOPPED
        self.stream = None
        self._task = None

    @property
    def address(self):
        """Фактический адрес сокета (host, port) или None, если сервер остановлен."""
        return self.stream.sockname if self.stream else None

    @property
    def is_running(self):
        return self.state is ServerState.RUNNING

    async def start(self):
        if self.is_running:
            self.logger.debug("QueryServer уже запущен")
            return
        self.logger.info(f"QueryServer: Запуск на {self.host}:{self.port}...")
        self.stream = await asyncio_dgram.bind((self.host, self.port))
        self.state = ServerState.RUNNING
        self._task = asyncio.create_task(self._serve(self.stream))
        host, port = self.address[:2]
        self.logger.info(f"QueryServer: Слушаю на {host}:{port}")

    async def stop(self):
        task, stream = self._task, self.stream
        self._task = None
        self.stream = None
        self.state = ServerState.STOPPED

        if task and not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
        if stream:
            stream.close()
            self.logger.info("QueryServer: Соединение asyncio_dgram закрыто.")

    async def restart(self):
        self.logger.info("QueryServer: Перезапуск...")
        await self.stop()
        await self.start()

    async def _serve(self, stream):
        """Основной цикл обработки запросов."""
        try:
            while True:
                try:
                    data, addr = await stream.recv()
                except asyncio_dgram.TransportClosed:
                    raise
                except OSError as e:
                    self.report_error("recv", e)
                    continue

                self.logger.debug(f"QueryServer: Получен запрос от {addr}: {data}")
                try:
                    response = self.dispatcher.dispatch(data, addr)
                except Exception as e:
                    self.report_error("dispatch", e, addr)
                    continue

                if response is None:
                    self.logger.debug(f"QueryServer: Ответ клиенту {addr[0]}:{addr[1]} не сформирован")
                    continue

                try:
                    await stream.send(response, addr)
                    self.logger.debug(f"QueryServer: Отправлен ответ клиенту {addr[0]}:{addr[1]} - {response}")
                except asyncio_dgram.TransportClosed:
                    raise
                except OSError as e:
                    self.report_error("send", e, addr)
        except asyncio.CancelledError:
            self.logger.info("QueryServer: Задача отменена, завершаю работу.")
            raise
        except asyncio_dgram.TransportClosed as e:
            self.report_error("recv", e)
            if self.stream is stream:
                self.state = ServerState.STOPPED
                self.stream = None
                self._task = None

    def report_error(self, operation, error, addr=None):
        """Сообщает об ошибке транспорта; цикл обработки при этом продолжается."""
        where = f" ({addr[0]}:{addr[1]})" if addr else ""
        self.logger.error(f"QueryServer: Ошибка {operation}{where}: {error!r}")
        if self.mediator:
            self.mediator.notify(TransportErrorEvent(operation=operation, error=repr(error), address=addr))
