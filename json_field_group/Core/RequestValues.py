"""
Request Values

Single Responsibility: Give fields a narrow, read-only view of the values
submitted with a write request.
"""

import json
from typing import Any, Dict, Iterable, List, Mapping, Protocol, runtime_checkable

from django.http import HttpRequest, QueryDict


@runtime_checkable
class RequestValuesProtocol(Protocol):
    """What a fill callback may ask of the incoming request."""

    def exists(self, key: str) -> bool: ...

    def get(self, key: str, default: Any = None) -> Any: ...

    def keys(self) -> List[str]: ...

    def only(self, keys: Iterable[str]) -> Dict[str, Any]: ...


class RequestValues:
    """
    Request values backed by a mapping or a Django ``QueryDict``.

    Keys are the submitted input names, so attributes nested in a JSON
    column arrive qualified (``meta->title``). For a ``QueryDict`` the last
    submitted value of a key is used.
    """

    def __init__(self, data: Mapping[str, Any] = None):
        self._data = data if data is not None else {}

    @classmethod
    def from_http_request(cls, request: HttpRequest) -> 'RequestValues':
        """
        Build request values from a Django request.

        JSON bodies are decoded; anything else is read from ``request.POST``.

        Raises:
            ValueError: If a JSON body is not a JSON object.
        """
        if request.content_type == 'application/json':
            payload = json.loads(request.body or b'{}')
            if not isinstance(payload, dict):
                raise ValueError("JSON request body must be an object")
            return cls(payload)
        return cls(request.POST)

    def exists(self, key: str) -> bool:
        return key in self._data

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def __getitem__(self, key: str) -> Any:
        if isinstance(self._data, QueryDict):
            return self._data.get(key)
        return self._data[key]

    def __contains__(self, key: str) -> bool:
        return self.exists(key)

    def keys(self) -> List[str]:
        return list(self._data.keys())

    def only(self, keys: Iterable[str]) -> Dict[str, Any]:
        return {key: self[key] for key in keys if self.exists(key)}

    def __repr__(self):
        return f"<RequestValues keys={self.keys()!r}>"
