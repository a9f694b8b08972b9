import json
from enum import Enum
from pathlib import PurePath
from typing import Any, Callable, Dict, Optional

import yaml

try:
    from swagger_explorer.exceptions import ParseError
except ImportError:
    from exceptions import ParseError

Parser = Callable[[bytes], Any]


class SpecFormat(str, Enum):
    JSON = "json"
    YAML = "yaml"


def _reject_constant(token: str):
    raise ValueError(f"Non-standard JSON constant: {token}")


def parse_json(raw: bytes) -> Any:
    """Строгий JSON: без NaN/Infinity и только валидный UTF-8."""
    try:
        return json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except (UnicodeDecodeError, ValueError) as e:
        raise ParseError("Invalid JSON format") from e


def parse_yaml(raw: bytes) -> Any:
    try:
        return yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ParseError("Invalid YAML format.") from e


CONTENT_TYPES: Dict[str, SpecFormat] = {
    "application/json": SpecFormat.JSON,
    "application/x-yaml": SpecFormat.YAML,
}

EXTENSIONS: Dict[str, SpecFormat] = {
    ".json": SpecFormat.JSON,
    ".yaml": SpecFormat.YAML,
}

PARSERS: Dict[SpecFormat, Parser] = {
    SpecFormat.JSON: parse_json,
    SpecFormat.YAML: parse_yaml,
}


def _media_type(content_type: Optional[str]) -> str:
    # "application/json; charset=utf-8" -> "application/json"
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def _extension(filename: Optional[str]) -> str:
    if not filename:
        return ""
    return PurePath(filename).suffix.lower()


def resolve_format(content_type: Optional[str], filename: Optional[str]) -> Optional[SpecFormat]:
    """
    Определяет формат файла.
    Content-Type имеет приоритет; если он не распознан (например,
    application/octet-stream от браузера), используется расширение имени файла.
    """
    fmt = CONTENT_TYPES.get(_media_type(content_type))
    if fmt is None:
        fmt = EXTENSIONS.get(_extension(filename))
    return fmt


def resolve_parser(content_type: Optional[str], filename: Optional[str]) -> Optional[Parser]:
    fmt = resolve_format(content_type, filename)
    if fmt is None:
        return None
    return PARSERS[fmt]
