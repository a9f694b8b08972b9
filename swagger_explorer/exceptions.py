"""
Ошибки обработки загруженной спецификации.

Каждый класс несёт HTTP-статус, с которым он отдаётся клиенту.
Тело ответа всегда plain text (см. response_text), успешные ответы - JSON.

    SwaggerExplorerError     (500)
    +-- NoFileUploadedError  (400)
    +-- UnsupportedTypeError (415)
    +-- EmptyFileError       (422)
    +-- ParseError           (422, "Error: ...")
    +-- SpecValidationError  (422, "Invalid OpenAPI format. ...")
    +-- ResourceNotFoundError(404)
    +-- UnexpectedError      (500)
"""


class SwaggerExplorerError(Exception):
    status_code: int = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def response_text(self) -> str:
        return self.message


class NoFileUploadedError(SwaggerExplorerError):
    status_code = 400

    def __init__(self, message: str = "No file uploaded."):
        super().__init__(message)


class UnsupportedTypeError(SwaggerExplorerError):
    status_code = 415

    def __init__(self, message: str = "Unsupported file type. Please upload a JSON or YAML file."):
        super().__init__(message)


class EmptyFileError(SwaggerExplorerError):
    status_code = 422

    def __init__(self, message: str = "Uploaded file is empty."):
        super().__init__(message)


class ParseError(SwaggerExplorerError):
    """Файл не разобрался как JSON/YAML. Сообщение парсера отдаётся с префиксом 'Error: '."""

    status_code = 422

    def response_text(self) -> str:
        return f"Error: {self.message}"


class SpecValidationError(SwaggerExplorerError):
    """Документ разобран, но не является корректным OpenAPI/Swagger."""

    status_code = 422

    def __init__(self, detail: str):
        super().__init__(f"Invalid OpenAPI format. {detail}")
        self.detail = detail


class ResourceNotFoundError(SwaggerExplorerError):
    status_code = 404

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)


class UnexpectedError(SwaggerExplorerError):
    status_code = 500

    def __init__(self, detail: str):
        super().__init__(f"Error processing Swagger file: {detail}")
        self.detail = detail
