"""Проверка URL источников спецификации"""

import re

import httpx

_IPV4_RE = re.compile(r"^(\d{1,3}\.){3}\d{1,3}$")
_IPV6_RE = re.compile(r"^([0-9a-fA-F]{0,4}:){2,7}[0-9a-fA-F]{0,4}$")
_DOMAIN_RE = re.compile(r"^([a-zA-Z0-9-]+\.)*[a-zA-Z0-9-]+\.[a-zA-Z]{2,}$")


def is_valid_url(
    value: str,
    require_protocol: bool = True,
    allow_localhost: bool = True,
    allow_ip: bool = True,
) -> bool:
    """
    Проверяет, что строка - корректный http(s) URL.

    Args:
        value: Проверяемая строка
        require_protocol: Требовать явный http:// или https://
        allow_localhost: Разрешать localhost и 127.x.x.x
        allow_ip: Разрешать IP адреса вместо доменного имени

    Examples:
        >>> is_valid_url("https://api.example.com/docs")
        True
        >>> is_valid_url("openapi: 3.0.0")
        False
    """
    if not value or not isinstance(value, str):
        return False

    value = value.strip()
    if not require_protocol and "://" not in value:
        value = "https://" + value

    if any(c.isspace() for c in value):
        return False

    try:
        url = httpx.URL(value)
    except (httpx.InvalidURL, ValueError):
        return False

    if url.scheme not in ("http", "https"):
        return False

    hostname = url.host
    if not hostname:
        return False

    if not allow_localhost and (
        hostname == "localhost" or hostname.startswith("127.") or hostname == "::1"
    ):
        return False

    is_ip = bool(_IPV4_RE.match(hostname) or _IPV6_RE.match(hostname))
    if is_ip:
        return allow_ip

    if "localhost" in hostname:
        return True

    if not _DOMAIN_RE.match(hostname):
        return False

    for segment in hostname.split("."):
        if len(segment) > 63 or segment.startswith("-") or segment.endswith("-"):
            return False

    return True
