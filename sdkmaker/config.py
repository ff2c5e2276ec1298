"""
Конфигурация для генерации SDK
"""

import os
from dataclasses import dataclass
from typing import Optional

import toml

from .internal.errors import GenerationError

CONFIG_FILE = "sdk.toml"
DEFAULT_OUTPUT_DIR = "sdk"


@dataclass
class SdkConfig:
    """Конфигурация генератора SDK"""

    source: Optional[str] = None
    output_dir: Optional[str] = None
    package_name: Optional[str] = None

    @classmethod
    def from_file(
        cls, config_path: str = CONFIG_FILE, search_dir: str = None
    ) -> Optional["SdkConfig"]:
        """Загрузка конфигурации из файла; None если файла нет"""
        # Если указана директория для поиска, ищем конфиг там
        if search_dir and os.path.isdir(search_dir):
            config_in_dir = os.path.join(search_dir, CONFIG_FILE)
            if os.path.exists(config_in_dir):
                config_path = config_in_dir

        if not os.path.exists(config_path):
            return None

        try:
            config_data = toml.load(config_path)
        except (toml.TomlDecodeError, OSError) as e:
            raise GenerationError.validation(
                "load_config",
                f"Error reading or validating configuration file: {e}",
                {"path": config_path},
            ) from e

        return cls(
            source=config_data.get("source"),
            output_dir=config_data.get("output_dir"),
            package_name=config_data.get("package_name"),
        )

    def save_to_file(self, config_path: str = CONFIG_FILE) -> None:
        """Сохранение конфигурации в файл"""
        config_data = {
            key: value
            for key, value in {
                "source": self.source,
                "output_dir": self.output_dir,
                "package_name": self.package_name,
            }.items()
            if value is not None
        }

        with open(config_path, "w", encoding="utf-8") as f:
            toml.dump(config_data, f)

    def merge_with_args(self, args) -> "SdkConfig":
        """Объединение с аргументами командной строки (аргументы важнее)"""
        return SdkConfig(
            source=getattr(args, "source", None) or self.source,
            output_dir=getattr(args, "output", None) or self.output_dir,
            package_name=getattr(args, "package_name", None) or self.package_name,
        )
