from dataclasses import dataclass
from typing import Callable, List

from ..types.models import CodeBlock, CodeFile, Project
from ..types.spec import OrganizedModel
from ..utils.naming import to_identifier
from .aggregator import generate_api_aggregator
from .api_methods import generate_controller_file
from .create_client import generate_create_client_file
from .readme import generate_readme
from .schemas import generate_models
from .templates import generate_package_json, templates

DEFAULT_VERSION = "1.0.0"


@dataclass
class Artifact:
    """Один файл SDK и функция его генерации"""

    file_name: str
    render: Callable[[], CodeFile]


def _static_file(file_name: str, content: str) -> CodeFile:
    return CodeFile(file_name=file_name, code_blocks=[CodeBlock(code=content)])


class ClientGenerator:
    """Генератор TypeScript SDK из организованной OpenAPI модели"""

    def __init__(self, model: OrganizedModel, package_name: str):
        self.model = model
        self.package_name = package_name

    def artifacts(self) -> List[Artifact]:
        """
        Все файлы SDK, по одному независимому генератору на файл.

        Ошибка одного генератора не влияет на остальные.
        """
        model = self.model

        artifacts = [
            Artifact("src/models.ts", lambda: generate_models(model.components)),
            Artifact(
                "src/axiosClient.ts",
                lambda: _static_file("src/axiosClient.ts", templates.axios_client),
            ),
            Artifact("src/API.ts", lambda: generate_api_aggregator(model.groups)),
            Artifact(
                "README.md",
                lambda: generate_readme(
                    model.groups, model.name, self.package_name, model.description
                ),
            ),
            Artifact("src/index.ts", lambda: _static_file("src/index.ts", templates.index)),
            Artifact(
                "package.json",
                lambda: _static_file(
                    "package.json",
                    generate_package_json(
                        self.package_name,
                        model.version or DEFAULT_VERSION,
                        model.description,
                    ),
                ),
            ),
            Artifact("tsconfig.json", lambda: _static_file("tsconfig.json", templates.tsconfig)),
            Artifact(
                "src/createClient.ts",
                lambda: generate_create_client_file(model.groups, model.name, model.base_url),
            ),
        ]

        for group in model.non_empty_groups():
            artifacts.append(
                Artifact(
                    f"src/{to_identifier(group.name)}.ts",
                    lambda g=group: generate_controller_file(g),
                )
            )

        return artifacts

    def generate(self) -> Project:
        """Синхронная генерация всех файлов; первая ошибка прерывает генерацию"""
        project = Project(name=self.package_name)
        for artifact in self.artifacts():
            project.add_file(artifact.render())
        return project
