import json
import logging
from typing import Any, Dict, List, Optional

from prance import ResolvingParser, ValidationError
from prance.util.url import ResolutionError
from pydantic import BaseModel

try:
    from swagger_explorer.exceptions import ResourceNotFoundError, SpecValidationError
except ImportError:
    from exceptions import ResourceNotFoundError, SpecValidationError

logger = logging.getLogger("app")

# Ключи Path Item Object, которые являются операциями
HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


class Resource(BaseModel):
    path: str
    method: str


def validate_document(document: Any) -> Dict[str, Any]:
    """
    Валидирует документ как Swagger 2.0 / OpenAPI 3.x и разрешает все $ref.

    Валидацию и разыменование делает prance с бэкендом openapi-spec-validator.
    Документ уже разобран загрузчиком, поэтому в prance он уходит строкой JSON.

    Raises:
        SpecValidationError: "Invalid OpenAPI format. <деталь от валидатора>"
    """
    if not isinstance(document, dict):
        raise SpecValidationError("Document root must be a mapping.")

    # default=str: YAML может дать date/datetime для незакавыченных дат.
    # ensure_ascii=False: prance читает строку как YAML, а \uXXXX-пары
    # из non-BMP символов превращаются в одиночные суррогаты.
    try:
        spec_string = json.dumps(document, default=str, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        # ключи-даты и циклические якоря YAML в JSON не выражаются
        raise SpecValidationError(f"Document cannot be represented as JSON: {e}") from e

    try:
        parser = ResolvingParser(spec_string=spec_string, backend="openapi-spec-validator")
    # LookupError: висячий JSON pointer в $ref (KeyError/IndexError из prance.util.path)
    except (ValidationError, ResolutionError, LookupError) as e:
        raise SpecValidationError(str(e)) from e

    return parser.specification


def _operations(path_item: Any):
    if not isinstance(path_item, dict):
        return
    for key, operation in path_item.items():
        if key in HTTP_METHODS:
            yield key, operation


def extract_resources(spec: Dict[str, Any]) -> List[Resource]:
    """Плоский список (path, method) в порядке объявления в документе."""
    resources = []

    for path, path_item in (spec.get("paths") or {}).items():
        for method, _ in _operations(path_item):
            resources.append(Resource(path=path, method=method))

    return resources


def find_parameters(spec: Optional[Dict[str, Any]], path: Any, method: Any) -> List[Any]:
    """
    Возвращает parameters операции path+method (или []).
    Сравнение ключей точное, без нормализации регистра и слэшей.
    """
    if spec is None or not isinstance(path, str) or not isinstance(method, str):
        raise ResourceNotFoundError()

    operations = dict(_operations((spec.get("paths") or {}).get(path)))
    if method not in operations:
        raise ResourceNotFoundError()

    operation = operations[method] or {}
    return operation.get("parameters") or []
