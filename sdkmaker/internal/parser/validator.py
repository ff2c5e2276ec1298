"""Минимальная структурная проверка OpenAPI/Swagger документа"""

from collections.abc import Mapping
from typing import Any

from ..errors import GenerationError

VERSION_MARKERS = ("swagger", "openapi", "info", "paths")


def validate(doc: Any) -> bool:
    """Документ содержит хотя бы один из маркеров версии"""
    if not isinstance(doc, Mapping):
        return False
    return any(marker in doc for marker in VERSION_MARKERS)


def assert_valid(doc: Any) -> None:
    if not validate(doc):
        raise GenerationError.validation(
            "parse", "Invalid Swagger/OpenAPI document structure"
        )
