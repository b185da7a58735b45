"""
Uniform JSON envelope returned by every transport operation.

Success: {"success": true, "data"?, "message"?, "meta"?}
Failure: {"success": false, "message", "details"?}
"""
from typing import Any, Dict, Optional

from fastapi.encoders import jsonable_encoder


def _encode(data: Any) -> Any:
    # Pydantic models are dumped with their camelCase aliases
    return jsonable_encoder(data, by_alias=True)


def success(data: Any, message: Optional[str] = None, meta: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    body = {"success": True, "data": _encode(data)}
    if message:
        body["message"] = message
    if meta is not None:
        body["meta"] = _encode(meta)
    return body


def success_with_meta(data: Any, meta: Dict[str, Any], message: Optional[str] = None) -> Dict[str, Any]:
    body = {"success": True, "data": _encode(data), "meta": _encode(meta)}
    if message:
        body["message"] = message
    return body


def created(data: Any, message: Optional[str] = None) -> Dict[str, Any]:
    return {"success": True, "data": _encode(data), "message": message or "Resource created successfully"}


def updated(data: Any, message: Optional[str] = None) -> Dict[str, Any]:
    return {"success": True, "data": _encode(data), "message": message or "Resource updated successfully"}


def deleted(message: Optional[str] = None) -> Dict[str, Any]:
    return {"success": True, "message": message or "Resource deleted successfully"}


def message(text: str) -> Dict[str, Any]:
    return {"success": True, "message": text}


def failure(text: str, details: Optional[Any] = None) -> Dict[str, Any]:
    body = {"success": False, "message": text}
    if details is not None:
        body["details"] = _encode(details)
    return body
