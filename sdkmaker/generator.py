"""
Главный модуль генератора - чистый интерфейс
"""

import asyncio
import logging
import os
from typing import List, Optional, Union

from .internal.errors import GenerationError
from .internal.generator.client_generator import Artifact, ClientGenerator
from .internal.io import FileWriter, HttpFetcher, NpmBuildRunner
from .internal.parser.loader import load
from .internal.parser.openapi import organize
from .internal.types.models import Project
from .internal.types.spec import OrganizedModel, RawInput

logger = logging.getLogger(__name__)


def validate_input(source, package_name) -> None:
    if not source:
        raise GenerationError.validation("make_sdk", "swaggerPathOrContent is required")
    if not package_name or not isinstance(package_name, str):
        raise GenerationError.validation("make_sdk", "Valid package name is required")


class SdkGenerator:
    """Загрузка спецификации, генерация и запись всех файлов SDK, сборка"""

    def __init__(
        self,
        package_name: str,
        output_dir: str,
        fetcher: Optional[HttpFetcher] = None,
        writer: Optional[FileWriter] = None,
        build_runner: Optional[NpmBuildRunner] = None,
        skip_build: bool = False,
    ):
        self.package_name = package_name
        self.output_dir = output_dir
        self.fetcher = fetcher or HttpFetcher()
        self.writer = writer or FileWriter()
        self.build_runner = build_runner or NpmBuildRunner()
        self.skip_build = skip_build

    async def organize(self, source: Union[RawInput, str]) -> OrganizedModel:
        """Загрузка и организация спецификации без записи файлов"""
        validate_input(source, self.package_name)
        doc = await load(source, fetcher=self.fetcher)
        return organize(doc)

    async def _produce(self, artifact: Artifact) -> str:
        code_file = artifact.render()
        directory, filename = os.path.split(os.path.join(self.output_dir, artifact.file_name))
        return await self.writer.write(directory, filename, str(code_file))

    async def write(self, model: OrganizedModel) -> List[str]:
        """
        Параллельная генерация и запись всех файлов.

        Задачи не отменяют друг друга; после завершения всех
        пробрасывается первая ошибка.
        """
        artifacts = ClientGenerator(model, self.package_name).artifacts()
        results = await asyncio.gather(
            *(self._produce(artifact) for artifact in artifacts),
            return_exceptions=True,
        )

        failures = [
            (artifact, result)
            for artifact, result in zip(artifacts, results)
            if isinstance(result, BaseException)
        ]
        for artifact, error in failures:
            logger.error("Не удалось сгенерировать %s: %s", artifact.file_name, error)
        if failures:
            raise failures[0][1]

        return list(results)

    async def generate(self, source: Union[RawInput, str]) -> bool:
        """Полный цикл; возвращает результат сборки"""
        model = await self.organize(source)
        written = await self.write(model)
        logger.info("Записано %d файлов в %s", len(written), self.output_dir)

        if self.skip_build:
            return True

        return await asyncio.to_thread(self.build_runner.build, self.output_dir)


async def make_sdk(
    source: Union[RawInput, str],
    output_dir: str,
    package_name: str,
    **kwargs,
) -> bool:
    """Создание TypeScript SDK из OpenAPI спецификации"""
    generator = SdkGenerator(package_name, output_dir, **kwargs)
    return await generator.generate(source)


def generate_project(model: OrganizedModel, package_name: str) -> Project:
    """Все файлы SDK в памяти, без записи на диск"""
    return ClientGenerator(model, package_name).generate()
