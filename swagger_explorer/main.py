from fastapi import Depends, FastAPI, File, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, List, Optional, Union
import time
import logging
import uvicorn

try:
    from swagger_explorer.config import settings
    from swagger_explorer.logging_config import init_logging
    from swagger_explorer.exceptions import (
        NoFileUploadedError,
        ResourceNotFoundError,
        SwaggerExplorerError,
        UnexpectedError,
    )
    from swagger_explorer.loader import load_document, save_upload, scoped_upload
    from swagger_explorer.openapi_parser import Resource, extract_resources, validate_document
    from swagger_explorer.state import SpecStore
except ImportError:
    from config import settings
    from logging_config import init_logging
    from exceptions import (
        NoFileUploadedError,
        ResourceNotFoundError,
        SwaggerExplorerError,
        UnexpectedError,
    )
    from loader import load_document, save_upload, scoped_upload
    from openapi_parser import Resource, extract_resources, validate_document
    from state import SpecStore

init_logging()
logger = logging.getLogger("app")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Создаём каталог для временных загрузок при старте."""
    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    logger.info("startup", extra={"upload_dir": str(upload_dir.resolve()), "port": settings.PORT})

    yield


app = FastAPI(title="Swagger Explorer", lifespan=lifespan)
app.state.spec_store = SpecStore()

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    # Для загрузок важны размер и тип тела (multipart / json)
    logger.info(
        "incoming_request",
        extra={
            "method": request.method,
            "url": request.url.path,
            "client_ip": request.client.host if request.client else None,
            "request_content_type": request.headers.get("content-type"),
            "request_bytes": request.headers.get("content-length"),
        }
    )

    start_time = time.perf_counter()
    response = await call_next(request)
    duration = round(time.perf_counter() - start_time, 4)

    logger.info(
        "request_complete",
        extra={
            "method": request.method,
            "url": request.url.path,
            "status_code": response.status_code,
            "response_content_type": response.headers.get("content-type"),
            "spec_loaded": request.app.state.spec_store.loaded,
            "duration": duration
        }
    )

    return response


@app.exception_handler(SwaggerExplorerError)
async def explorer_error_handler(request: Request, exc: SwaggerExplorerError):
    # Ошибки отдаются plain text, успешные ответы - JSON
    return PlainTextResponse(exc.response_text(), status_code=exc.status_code)


class ParametersRequest(BaseModel):
    # Любой тип: нестроковый path/method просто не находится (404), а не 422
    path: Any = None
    method: Any = None


def get_spec_store(request: Request) -> SpecStore:
    return request.app.state.spec_store


def _load_and_validate(upload) -> dict:
    with scoped_upload(upload):
        document = load_document(upload)
    return validate_document(document)


@app.post("/swagger", response_model=List[Resource])
async def upload_swagger(
    swagger: Union[UploadFile, str, None] = File(None),
    store: SpecStore = Depends(get_spec_store),
):
    """
    Загрузка Swagger/OpenAPI документа (multipart, поле 'swagger').
    Возвращает список ресурсов [{path, method}] и делает документ текущим.
    """
    # Поле swagger без файла (обычное form-поле) тоже считается отсутствием файла
    if swagger is None or isinstance(swagger, str):
        raise NoFileUploadedError()

    try:
        upload = await save_upload(swagger, settings.UPLOAD_DIR)
        spec = await run_in_threadpool(_load_and_validate, upload)
        resources = extract_resources(spec)
    except SwaggerExplorerError as e:
        logger.info(
            "upload_rejected",
            extra={"upload_filename": swagger.filename, "status_code": e.status_code, "reason": e.message}
        )
        raise
    except Exception as e:
        logger.exception("upload_failed", extra={"upload_filename": swagger.filename})
        raise UnexpectedError(str(e)) from e

    store.set(spec)
    logger.info("spec_loaded", extra={"upload_filename": swagger.filename, "resources": len(resources)})
    return resources


@app.post("/parameters")
async def get_parameters(
    req: Optional[ParametersRequest] = None,
    store: SpecStore = Depends(get_spec_store),
) -> List[Any]:
    req = req or ParametersRequest()
    try:
        return store.lookup_parameters(req.path, req.method)
    except ResourceNotFoundError:
        logger.info("parameters_not_found", extra={"path": req.path, "method": req.method})
        raise


@app.get("/")
async def root(store: SpecStore = Depends(get_spec_store)):
    return {"message": "Swagger Explorer работает.", "spec_loaded": store.loaded}


def run() -> None:
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
