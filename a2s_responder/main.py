# a2s_responder/main.py

import argparse
import asyncio
import dataclasses
import json
import signal
import sys
import threading

from a2s_responder.config import Config
from a2s_responder.constants import DEFAULT_QUERY_PORT, DEFAULT_SERVER_IP, Opcode
from a2s_responder.events.types import TransportErrorEvent
from a2s_responder.game_state.synthetic import SyntheticGameState
from a2s_responder.logger import Logger
from a2s_responder.mediator.mediator import Mediator
from a2s_responder.query_server import client
from a2s_responder.query_server.dispatcher import Dispatcher
from a2s_responder.query_server.query_server import QueryServer

QUERY_TYPES = {
    "info": Opcode.INFO,
    "players": Opcode.PLAYER,
    "rules": Opcode.RULES,
    "challenge": Opcode.CHALLENGE,
}


class MainApp:
    def __init__(self, config, logger):
        self.config = config
        self.logger = logger
        self.running = True
        self.shutdown_event = asyncio.Event()

        self.mediator = Mediator(config, logger=self.logger)
        SyntheticGameState(config).register(self.mediator)
        self.mediator.subscribe(TransportErrorEvent, self.on_transport_error)

        self.dispatcher = Dispatcher(self.mediator, echo_unknown=config.echo_unknown, logger=self.logger)
        self.query_server = QueryServer(
            self.dispatcher,
            host=config.get("SERVER_IP", DEFAULT_SERVER_IP),
            port=config.get("QUERY_PORT", DEFAULT_QUERY_PORT),
            logger=self.logger,
            mediator=self.mediator,
        )

    def on_transport_error(self, event: TransportErrorEvent):
        self.logger.debug(f"Ошибка транспорта ({event.operation}): {event.error}")

    async def handle_command(self, command: str) -> bool:
        """
        Команда консоли: пустая строка - остановка, '!' - перезапуск.
        :return: False, если чтение консоли нужно прекратить.
        """
        if not command:
            self.shutdown_event.set()
            return False
        if command == "!":
            print("Server restarting...", end="", flush=True)
            await self.query_server.restart()
            print("Done!")
        return True

    def _console_reader(self, loop):
        """Читает stdin в отдельном потоке и передаёт команды в цикл событий."""
        for line in sys.stdin:
            if loop.is_closed():
                return
            future = asyncio.run_coroutine_threadsafe(self.handle_command(line.rstrip("\r\n")), loop)
            try:
                if not future.result():
                    return
            except Exception:
                self.logger.exception("Ошибка выполнения команды консоли")
        # EOF - останавливаемся
        if not loop.is_closed():
            loop.call_soon_threadsafe(self.shutdown_event.set)

    async def run(self, interactive=True):
        self.logger.info("Starting application...")
        print("Server starting...", end="", flush=True)
        await self.query_server.start()
        print("Done!")

        if interactive:
            print("Press Enter to stop the server or '!' to restart the server...")
            loop = asyncio.get_running_loop()
            threading.Thread(target=self._console_reader, args=(loop,), daemon=True).start()

        await self.shutdown_event.wait()
        self.logger.info("Received shutdown signal. Stopping server...")

        print("Server stopping...", end="", flush=True)
        await self.query_server.stop()
        print("Done!")
        self.running = False
        self.logger.info("Application shutdown complete.")


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="A2S query responder")
    parser.add_argument("--config", default=None, help="Путь к config.json (по умолчанию config.json в корне проекта)")
    parser.add_argument("--host", default=None, help="Адрес для привязки (по умолчанию SERVER_IP из конфига)")
    parser.add_argument("--port", type=int, default=None, help="UDP-порт (по умолчанию QUERY_PORT из конфига)")
    parser.add_argument("--log-file", default=None, help="Файл лога (по умолчанию LOG.LOG_FILE из конфига)")
    parser.add_argument("--no-console", action="store_true", help="Не читать команды из консоли")

    subparsers = parser.add_subparsers(dest="command")
    query_parser = subparsers.add_parser("query", help="Отправить запрос A2S и вывести ответ в JSON")
    query_parser.add_argument("target_host")
    query_parser.add_argument("target_port", type=int)
    query_parser.add_argument("--type", choices=sorted(QUERY_TYPES), default="info")
    query_parser.add_argument("--timeout", type=float, default=5.0)
    return parser.parse_args(argv)


def _to_json(result):
    if isinstance(result, list):
        return [dataclasses.asdict(item) for item in result]
    if dataclasses.is_dataclass(result):
        return dataclasses.asdict(result)
    return result


async def run_query(args):
    try:
        result = await client.query(args.target_host, args.target_port, QUERY_TYPES[args.type], args.timeout)
    except asyncio.TimeoutError:
        print(json.dumps({"error": "timeout"}))
        return 1
    except ValueError as e:
        print(json.dumps({"error": str(e)}, ensure_ascii=False))
        return 1
    print(json.dumps(_to_json(result), ensure_ascii=False, indent=2))
    return 0


async def serve(args):
    try:
        config = Config(args.config)
    except (FileNotFoundError, ValueError) as e:
        print(f"Ошибка конфигурации: {e}", file=sys.stderr)
        return 1
    if args.host:
        config.set("SERVER_IP", args.host)
    if args.port is not None:
        config.set("QUERY_PORT", args.port)

    logger = Logger(config, log_file=args.log_file)
    logger.info(f"UDP server port: {config.get('QUERY_PORT', DEFAULT_QUERY_PORT)}")
    app = MainApp(config, logger)

    def handle_shutdown(signum, frame):
        if not app.running:
            return
        app.logger.info(f"Received shutdown signal {signum}. Shutting down...")
        loop.call_soon_threadsafe(app.shutdown_event.set)

    loop = asyncio.get_running_loop()
    signal.signal(signal.SIGINT, handle_shutdown)
    signal.signal(signal.SIGTERM, handle_shutdown)

    await app.run(interactive=not args.no_console)
    return 0


def run(argv=None):
    args = _parse_args(argv)
    coro = run_query(args) if args.command == "query" else serve(args)
    try:
        code = asyncio.run(coro)
    except (KeyboardInterrupt, SystemExit):
        code = 0
    sys.exit(code)


if __name__ == "__main__":
    run()
