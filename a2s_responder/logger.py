# a2s_responder/logger.py

import logging
import os
from logging.handlers import TimedRotatingFileHandler
from a2s_responder.config import Config
from a2s_responder.singleton import Singleton

APP_LOGGER_NAME = "app"

# ANSI цвета
COLORS = {
    'DEBUG': '\033[36m',  # Cyan
    'INFO': '\033[32m',  # Green
    'WARNING': '\033[33m',  # Yellow
    'ERROR': '\033[31m',  # Red
    'CRITICAL': '\033[1;31m',  # Bold red
    'RESET': '\033[0m'
}

LOG_FORMAT = "[%(asctime)s][%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):

    def format(self, record):
        color = COLORS.get(record.levelname, COLORS['RESET'])
        # Сохраняем оригинальный формат во время форматирования
        orig_fmt = self._style._fmt
        try:
            self._style._fmt = f"{color}{orig_fmt}{COLORS['RESET']}"
            return super().format(record)
        finally:
            self._style._fmt = orig_fmt


class Logger(Singleton):
    """
    Единый логгер проекта. Использование:
      logger = Logger(config)
      logger.info("Hello")
    Настраивает логгер "app"; логгеры компонентов (LoggerMixin) являются его потомками.
    Методы debug/info/error/... берутся у настроенного logging.Logger.
    """

    def __init__(self, config=None, log_file=None):
        # Защита от повторной инициализации
        if hasattr(self, '_initialized'):
            return

        config = config or Config()
        self.log_file = log_file or config.get("LOG.LOG_FILE", "./logs/app.log")

        self._logger = logging.getLogger(APP_LOGGER_NAME)
        self._logger.setLevel(getattr(logging, config.get("LOG.MAIN_LEVEL_LOG", "INFO")))
        self._logger.propagate = False

        # Добавляем только если ещё не добавлены
        if not self._logger.handlers:
            self._logger.addHandler(self._file_handler(config.get("LOG.LEVEL_FILE_LOG", "INFO")))
            self._logger.addHandler(self._console_handler(config.get("LOG.LEVEL_CONSOLE_LOG", "INFO")))

        self._initialized = True

    def _file_handler(self, level):
        log_dir = os.path.dirname(self.log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        # Новый файл каждую полночь, храним 2 недели
        handler = TimedRotatingFileHandler(self.log_file, when="midnight", backupCount=14, encoding="utf-8")
        handler.setLevel(getattr(logging, level))
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        return handler

    @staticmethod
    def _console_handler(level):
        handler = logging.StreamHandler()
        handler.setLevel(getattr(logging, level))
        handler.setFormatter(ColoredFormatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        return handler

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        return getattr(self._logger, name)


class LoggerMixin:
    """
    Даёт компоненту атрибут self.logger - дочерний логгер "app.<ИмяКласса>".
    Логгер, переданный явно через конструктор, имеет приоритет.
    """

    def __init__(self, *args, logger=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.logger = logger or logging.getLogger(APP_LOGGER_NAME).getChild(type(self).__name__)
