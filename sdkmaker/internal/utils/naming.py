"""Утилиты для работы с именами в генерируемом TypeScript коде"""

import re

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def is_identifier(name: str) -> bool:
    return bool(name) and bool(_IDENTIFIER_RE.match(name))


def to_identifier(name: str) -> str:
    """
    Приводит имя к допустимому идентификатору TypeScript.

    Корректные имена возвращаются без изменений, остальные склеиваются
    в camelCase по небуквенным разделителям.

    Examples:
        >>> to_identifier("getUsers")
        'getUsers'
        >>> to_identifier("X-Request-Id")
        'XRequestId'
        >>> to_identifier("user management")
        'userManagement'
    """
    if is_identifier(name):
        return name

    parts = [p for p in re.split(r"[^A-Za-z0-9_$]+", name or "") if p]
    if not parts:
        return "_"

    identifier = parts[0] + "".join(p[:1].upper() + p[1:] for p in parts[1:])
    if identifier[0].isdigit():
        identifier = "_" + identifier
    return identifier


def quote_literal(value) -> str:
    """Строковый литерал в одинарных кавычках"""
    text = str(value).replace("\\", "\\\\").replace("'", "\\'")
    return f"'{text}'"
