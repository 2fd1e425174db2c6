# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Bind JSON:API-style documents to lists of dataclass models.

Example::

    from dataclasses import dataclass, field
    from typing import List

    from jsonapi_records import unmarshal

    @dataclass
    class Article:
        id: str = ""
        title: str = ""
        author_id: str = ""
        tag_ids: List[str] = field(default_factory=list)

    articles = []
    unmarshal(
        {"articles": [{"id": "1", "title": "Hello", "links": {"author": "9", "tags": ["3"]}}]},
        articles,
        Article,
    )
"""

from .core.config import UnmarshalConfig
from .core.errors import (
    ContractViolationError,
    DocumentError,
    FieldError,
    IdentifierError,
    JsonApiError,
    LinkError,
)
from .data.marshal import marshal, marshal_to_json
from .data.unmarshal import Unmarshaler, unmarshal, unmarshal_from_json
from .models.collection import ModelCollection
from .utils._pandas import dataframe_to_document, models_to_dataframe

__version__ = "0.1.0"

__all__ = [
    "UnmarshalConfig",
    "ContractViolationError",
    "DocumentError",
    "FieldError",
    "IdentifierError",
    "JsonApiError",
    "LinkError",
    "marshal",
    "marshal_to_json",
    "Unmarshaler",
    "unmarshal",
    "unmarshal_from_json",
    "ModelCollection",
    "dataframe_to_document",
    "models_to_dataframe",
    "__version__",
]
