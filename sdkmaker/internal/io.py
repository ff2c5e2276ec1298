"""
Внешние зависимости конвейера: загрузка по сети, запись файлов, сборка SDK
"""

import asyncio
import logging
import os
import subprocess
from dataclasses import dataclass
from typing import Optional

import httpx

from .errors import GenerationError

logger = logging.getLogger(__name__)

ACCEPT_HEADER = "application/json, application/yaml, text/yaml"


@dataclass
class FetchResult:
    content: str
    content_type: str = ""


class HttpFetcher:
    """Загрузка спецификации по HTTP(S) через httpx"""

    def __init__(
        self,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._timeout = timeout
        self._transport = transport

    async def fetch(self, url: str) -> FetchResult:
        logger.debug("GET %s", url)
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(url, headers={"Accept": ACCEPT_HEADER})
                response.raise_for_status()
        except httpx.HTTPError as e:
            raise GenerationError.network(
                "fetch_from_url",
                "Failed to fetch Swagger documentation",
                {"url": url, "reason": str(e)},
            ) from e

        return FetchResult(
            content=response.text,
            content_type=response.headers.get("content-type", ""),
        )


class FileWriter:
    """Асинхронная запись файла с созданием директорий"""

    async def write(self, directory: str, filename: str, content: str) -> str:
        path = os.path.join(directory, filename)
        await asyncio.to_thread(self._write_sync, path, content)
        logger.debug("Записан файл %s", path)
        return path

    @staticmethod
    def _write_sync(path: str, content: str) -> None:
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)


class NpmBuildRunner:
    """Сборка сгенерированного SDK: npm install && npm run build"""

    commands = (("npm", "install"), ("npm", "run", "build"))

    def build(self, directory: str) -> bool:
        for command in self.commands:
            logger.info("Запуск %s в %s", " ".join(command), directory)
            try:
                subprocess.run(command, cwd=directory, check=True)
            except (OSError, subprocess.CalledProcessError) as e:
                logger.error("Сборка SDK завершилась ошибкой: %s", e)
                return False

        logger.info("Сборка SDK завершена")
        return True
