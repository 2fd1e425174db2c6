# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components.

This module contains configuration and the structured error types.
"""

from .config import UnmarshalConfig
from .errors import (
    ContractViolationError,
    DocumentError,
    FieldError,
    IdentifierError,
    JsonApiError,
    LinkError,
)

__all__ = [
    "UnmarshalConfig",
    "ContractViolationError",
    "DocumentError",
    "FieldError",
    "IdentifierError",
    "JsonApiError",
    "LinkError",
]
