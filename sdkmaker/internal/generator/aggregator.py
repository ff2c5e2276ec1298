from typing import List

from ..errors import GenerationError
from ..types.models import CodeFile, Function, Parameter
from ..types.spec import Group
from ..utils.naming import to_identifier


def generate_api_aggregator(groups: List[Group], file_name: str = "src/API.ts") -> CodeFile:
    """
    API.ts: подключает все непустые контроллеры к одному экземпляру axios.

    Контроллеры без операций пропускаются; если таких нет совсем,
    файл получается пустым.
    """
    if not isinstance(groups, list):
        raise GenerationError.validation(
            "generate_api_aggregator", "Controllers must be a list of groups"
        )

    active = [to_identifier(group.name) for group in groups if group.operations]

    code_file = CodeFile(file_name=file_name)
    if not active:
        return code_file

    code_file.imports.append("import { AxiosInstance } from 'axios';")
    code_file.imports.extend(f"import {name} from './{name}';" for name in active)

    code_file.add_function(
        Function(
            name="createApi",
            parameters=[Parameter(name="client", var_type="AxiosInstance")],
            exported=True,
            default_export=True,
        )
    ).set_code_block("return {\n" + "".join(f"\t...{name}(client),\n" for name in active) + "};")

    return code_file
