"""
Конфигурация в формате JSON.

Если файл не найден или повреждён, берутся настройки по‑умолчанию;
файл записывается на диск только при create_missing=True.
"""

import json
from pathlib import Path
from objtri.mesh.model import DEFAULT_OBJECT_NAME
from objtri.utils.logger import logger

DEFAULT_CONFIG = {
    "default_object_name": DEFAULT_OBJECT_NAME,
    "encoding": "utf-8",
    "log_level": "INFO",
}


class Config:
    """Singleton‑подобный объект конфигурации (только чтение)."""
    _instance = None

    def __new__(cls, path: str = "objtri.json", create_missing: bool = True):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load(create_missing)
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Забыть текущий экземпляр (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self, create_missing: bool):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = json.load(f)
                logger.info(f"[Config] Loaded configuration from {self.path}.")
                return
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
        else:
            logger.info(f"[Config] No config file at {self.path} – using defaults.")
        self.data = DEFAULT_CONFIG.copy()
        if create_missing:
            self.save()

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info(f"[Config] Configuration saved to {self.path}.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))
