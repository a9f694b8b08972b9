import logging
import tempfile
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Optional

from fastapi import UploadFile

try:
    from swagger_explorer.exceptions import EmptyFileError, UnsupportedTypeError
    from swagger_explorer.parsers import resolve_parser
except ImportError:
    from exceptions import EmptyFileError, UnsupportedTypeError
    from parsers import resolve_parser

logger = logging.getLogger("app")

CHUNK_SIZE = 1024 * 1024


@dataclass(frozen=True)
class UploadedFile:
    """Временный файл загрузки на диске + то, что о нём сообщил клиент."""

    path: Path
    content_type: Optional[str]
    filename: Optional[str]


async def save_upload(upload: UploadFile, upload_dir: str | Path) -> UploadedFile:
    """
    Сохраняет multipart-файл во временный файл внутри upload_dir.

    Удалять файл должен вызывающий код (см. scoped_upload).
    """
    directory = Path(upload_dir)
    directory.mkdir(parents=True, exist_ok=True)

    with tempfile.NamedTemporaryFile(dir=directory, prefix="upload-", delete=False) as tmp:
        try:
            while chunk := await upload.read(CHUNK_SIZE):
                tmp.write(chunk)
        except BaseException:
            tmp.close()
            Path(tmp.name).unlink(missing_ok=True)
            raise

    return UploadedFile(
        path=Path(tmp.name),
        content_type=upload.content_type,
        filename=upload.filename,
    )


@contextmanager
def scoped_upload(upload: UploadedFile) -> Iterator[UploadedFile]:
    """Отдаёт дескриптор и гарантированно удаляет временный файл на выходе."""
    try:
        yield upload
    finally:
        upload.path.unlink(missing_ok=True)
        logger.debug("upload_removed", extra={"upload_path": str(upload.path)})


def load_document(upload: UploadedFile) -> Any:
    """
    Читает загруженный файл и разбирает его в дерево dict/list.

    Raises:
        EmptyFileError: файл нулевого размера (парсинг не запускается)
        UnsupportedTypeError: ни Content-Type, ни расширение не распознаны
        ParseError: файл не является корректным JSON/YAML
    """
    if upload.path.stat().st_size == 0:
        raise EmptyFileError()

    parse = resolve_parser(upload.content_type, upload.filename)
    if parse is None:
        raise UnsupportedTypeError()

    return parse(upload.path.read_bytes())
