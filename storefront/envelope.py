# storefront/envelope.py
"""Uniform response bodies: {success, data|error, ...}."""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from fastapi.responses import JSONResponse


@dataclass(frozen=True)
class Success:
    status_code: int
    data: Any
    count: Optional[int] = None

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"success": True}
        if self.count is not None:
            body["count"] = self.count
        body["data"] = self.data
        return body

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.to_body())


@dataclass(frozen=True)
class Failure:
    status_code: int
    error: str

    def to_body(self) -> Dict[str, Any]:
        return {"success": False, "error": self.error}

    def to_response(self) -> JSONResponse:
        return JSONResponse(status_code=self.status_code, content=self.to_body())


Envelope = Union[Success, Failure]
