import argparse
import asyncio
import logging
import os
import sys

from sdkmaker.config import CONFIG_FILE, DEFAULT_OUTPUT_DIR, SdkConfig
from sdkmaker.generator import make_sdk
from sdkmaker.internal.errors import GenerationError


def _fail(message: str) -> None:
    print(f"❌ {message}", file=sys.stderr)
    sys.exit(1)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sdkmaker", description="Генерация TypeScript SDK из OpenAPI/Swagger"
    )
    parser.add_argument("-s", "--source", type=str, help="Путь, URL или текст спецификации")
    parser.add_argument("-o", "--output", type=str, help="Директория для генерации SDK")
    parser.add_argument("-p", "--package-name", type=str, help="Имя npm пакета")
    parser.add_argument(
        "-c", "--config", type=str, default=CONFIG_FILE, help="Путь к конфигу sdk.toml"
    )
    parser.add_argument(
        "--init-config", action="store_true", help="Создать конфиг файл sdk.toml"
    )
    parser.add_argument(
        "--skip-build", action="store_true", help="Не запускать npm install/build"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Подробный лог")
    return parser


def generate(argv=None):
    """Универсальная команда генерации SDK"""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Инициализация конфига
    if args.init_config:
        config = SdkConfig(
            source=args.source,
            output_dir=args.output or DEFAULT_OUTPUT_DIR,
            package_name=args.package_name,
        )
        config.save_to_file(args.config)
        print(f"✅ Создан конфиг файл {args.config}")
        return

    try:
        file_config = SdkConfig.from_file(os.path.abspath(args.config))
    except GenerationError as e:
        _fail(str(e))

    if file_config:
        print(f"📋 Используется конфиг {args.config}")
        final_config = file_config.merge_with_args(args)
    else:
        final_config = SdkConfig().merge_with_args(args)

    if not final_config.source or not final_config.output_dir:
        _fail(
            "Ошибка: source и output обязательны. "
            "Укажите их в конфиге или через аргументы командной строки"
        )

    print(f"🚀 Генерация SDK {final_config.package_name} в {final_config.output_dir}")

    try:
        built = asyncio.run(
            make_sdk(
                final_config.source,
                final_config.output_dir,
                final_config.package_name,
                skip_build=args.skip_build,
            )
        )
    except Exception as e:
        _fail(f"Ошибка генерации: {e}")

    if not built:
        print("⚠️ Файлы SDK записаны, но сборка завершилась ошибкой")
    print("✅ Генерация завершена успешно!")
    print(f"📦 SDK создан в: {os.path.abspath(final_config.output_dir)}")


if __name__ == "__main__":
    generate()
