import threading
from typing import Any, Dict, List, Optional

try:
    from swagger_explorer.openapi_parser import find_parameters
except ImportError:
    from openapi_parser import find_parameters


class SpecStore:
    """
    Текущая провалидированная спецификация процесса.

    Один писатель (успешный POST /swagger), много читателей (POST /parameters).
    set() целиком заменяет ссылку под замком, last write wins.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._spec: Optional[Dict[str, Any]] = None

    def set(self, spec: Dict[str, Any]) -> None:
        with self._lock:
            self._spec = spec

    def get(self) -> Optional[Dict[str, Any]]:
        with self._lock:
            return self._spec

    def clear(self) -> None:
        with self._lock:
            self._spec = None

    @property
    def loaded(self) -> bool:
        return self.get() is not None

    def lookup_parameters(self, path: Any, method: Any) -> List[Any]:
        return find_parameters(self.get(), path, method)
