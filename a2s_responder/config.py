# a2s_responder/config.py

import json
import os

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.dirname(__file__)), "config.json")


class Config:

    def __init__(self, config_path=None, data=None):
        """
        :param config_path: Путь к JSON-файлу конфигурации (по умолчанию config.json в корне проекта).
        :param data: Готовый словарь конфигурации; если передан, файл не читается.
        """
        if data is not None:
            self._config = data
            self.path = None
            return

        config_path = config_path or DEFAULT_CONFIG_PATH
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                self._config = json.load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Конфигурационный файл не найден: {config_path}")
        except json.JSONDecodeError as e:
            raise ValueError(f"Ошибка парсинга JSON в конфиге: {e}")
        self.path = config_path

    def get(self, key, default=None):
        """
        Общий безопасный доступ к любому полю.
        Поддерживает вложенные ключи через точку (например, "LOG.LEVEL_FILE_LOG").
        """
        keys = key.split('.')
        value = self._config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        return value if value is not None else default

    def set(self, key, value):
        """Переопределяет значение (например, аргументом командной строки)."""
        keys = key.split('.')
        node = self._config
        for k in keys[:-1]:
            node = node.setdefault(k, {})
        node[keys[-1]] = value

    @property
    def echo_unknown(self):
        """Свойство: отвечать ли эхом на нераспознанные запросы"""
        return bool(self.get("QUERY.ECHO_UNKNOWN", True))
