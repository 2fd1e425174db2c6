# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Error types raised while binding documents to model classes.

Two families exist and they do not share a base class:

- :class:`JsonApiError` and its subclasses describe a malformed document.
  They are recoverable; the destination may have been partially updated.
- :class:`ContractViolationError` describes a call-site defect (wrong
  destination or model type) and must be fixed in code, not handled.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class JsonApiError(Exception):
    """Base structured error for document data-shape problems."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "details": self.details,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class DocumentError(JsonApiError):
    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="document_error", subcode=subcode, details=details)


class FieldError(JsonApiError):
    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="field_error", subcode=subcode, details=details)


class IdentifierError(JsonApiError):
    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="identifier_error", subcode=subcode, details=details)


class LinkError(JsonApiError):
    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="link_error", subcode=subcode, details=details)


class ContractViolationError(TypeError):
    """
    The caller passed a destination or model that can never be bound.

    Raised when the destination is not a ``list``, the model is not a
    non-frozen dataclass type, or an element's type does not match the model.
    """


__all__ = [
    "JsonApiError",
    "DocumentError",
    "FieldError",
    "IdentifierError",
    "LinkError",
    "ContractViolationError",
]
