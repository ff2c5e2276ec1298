"""
Тесты для системы конфигурации
"""

import os
import tempfile

import pytest

from sdkmaker.config import CONFIG_FILE, SdkConfig
from sdkmaker.internal.errors import ErrorKind, GenerationError


class TestSdkConfig:
    """Тесты конфигурации генератора"""

    def test_config_creation(self):
        """Тест создания конфигурации"""
        config = SdkConfig(source="openapi.json", output_dir="sdk", package_name="users-sdk")

        assert config.source == "openapi.json"
        assert config.output_dir == "sdk"
        assert config.package_name == "users-sdk"

    def test_config_save_and_load(self):
        """Тест сохранения и загрузки конфигурации"""
        with tempfile.TemporaryDirectory() as temp_dir:
            config_path = os.path.join(temp_dir, "test_sdk.toml")

            # Создаем и сохраняем конфиг
            original_config = SdkConfig(
                source="http://api.example.com/docs-json", output_dir="example_sdk"
            )
            original_config.save_to_file(config_path)

            # Загружаем конфиг
            loaded_config = SdkConfig.from_file(config_path)

            assert loaded_config is not None
            assert loaded_config.source == "http://api.example.com/docs-json"
            assert loaded_config.output_dir == "example_sdk"
            assert loaded_config.package_name is None

    def test_config_search_dir(self, tmp_path):
        """Тест поиска sdk.toml в указанной директории"""
        SdkConfig(source="spec.yaml").save_to_file(str(tmp_path / CONFIG_FILE))

        config = SdkConfig.from_file("nonexistent.toml", search_dir=str(tmp_path))

        assert config is not None
        assert config.source == "spec.yaml"

    def test_config_file_not_exists(self):
        """Тест загрузки несуществующего конфига"""
        config = SdkConfig.from_file("nonexistent.toml")
        assert config is None

    def test_broken_config(self, tmp_path):
        config_path = tmp_path / CONFIG_FILE
        config_path.write_text("source = [unclosed", encoding="utf-8")

        with pytest.raises(GenerationError) as exc_info:
            SdkConfig.from_file(str(config_path))

        assert exc_info.value.kind is ErrorKind.VALIDATION
        assert exc_info.value.method_name == "load_config"

    def test_config_merge_with_args(self):
        """Тест объединения конфига с аргументами"""
        config = SdkConfig(source="openapi.json", output_dir="original_sdk", package_name="a")

        # Мокаем args
        class MockArgs:
            def __init__(self):
                self.source = "http://api.new.com/docs"
                self.output = None
                self.package_name = "b"

        merged = config.merge_with_args(MockArgs())

        assert merged.source == "http://api.new.com/docs"  # Переписан из args
        assert merged.output_dir == "original_sdk"  # Остался из config
        assert merged.package_name == "b"

    def test_default_values(self):
        """Тест значений по умолчанию"""
        config = SdkConfig()

        assert config.source is None
        assert config.output_dir is None
        assert config.package_name is None
