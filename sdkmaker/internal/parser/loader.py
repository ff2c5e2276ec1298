"""
Загрузка OpenAPI документа из файла, строки или по URL
"""

import asyncio
import json
import logging
from typing import Any, Dict, Optional, Union

import yaml

from ..errors import GenerationError
from ..io import HttpFetcher
from ..types.spec import InputKind, RawInput
from .validator import assert_valid

logger = logging.getLogger(__name__)

ATTEMPTED_FORMATS = ["JSON", "YAML"]


_NOT_PARSED = object()


def _parse_json(content: str) -> Any:
    try:
        return json.loads(content)
    except ValueError:
        return _NOT_PARSED


def _parse_yaml(content: str) -> Optional[Dict[str, Any]]:
    try:
        result = yaml.safe_load(content)
    except yaml.YAMLError:
        return None
    # Скаляр или пустой документ - не спецификация
    return result if isinstance(result, dict) else None


def parse_content(content: str) -> Any:
    """
    Разбор текста: сначала строгий JSON, затем YAML.

    Content-Type транспорта не учитывается - серверы нередко
    отдают YAML с типом JSON и наоборот. Корректный JSON возвращается
    как есть, даже если это не объект: структуру проверяет validator.
    """
    result = _parse_json(content)
    if result is not _NOT_PARSED:
        return result

    result = _parse_yaml(content)
    if result is not None:
        logger.debug("Документ разобран как YAML")
        return result

    raise GenerationError.content_parsing(
        "process_content",
        "Failed to parse content as JSON or YAML",
        {"attempted_formats": list(ATTEMPTED_FORMATS)},
    )


def _read_file(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


async def load(
    source: Union[RawInput, str, None], fetcher: Optional[HttpFetcher] = None
) -> Dict[str, Any]:
    """Получение и разбор документа в канонический словарь"""
    if isinstance(source, str) and source.strip():
        source = RawInput.detect(source)

    if not isinstance(source, RawInput) or not source.value.strip():
        raise GenerationError.validation("load", "Input is not a valid string")

    if source.kind is InputKind.URL:
        fetcher = fetcher or HttpFetcher()
        response = await fetcher.fetch(source.value)
        logger.info(
            "Загружено %d символов из %s (%s)",
            len(response.content),
            source.value,
            response.content_type or "unknown content-type",
        )
        content = response.content
    elif source.kind is InputKind.PATH:
        try:
            content = await asyncio.to_thread(_read_file, source.value)
        except (OSError, UnicodeDecodeError) as e:
            raise GenerationError.validation(
                "load", "Failed to read document file", {"path": source.value, "reason": str(e)}
            ) from e
    else:
        content = source.value

    doc = parse_content(content)
    assert_valid(doc)
    return doc
