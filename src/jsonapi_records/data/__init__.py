# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Document binding layer.

This module contains the unmarshaler (document to models, with upsert by
identifier) and the marshaler (models to document).
"""

from .marshal import marshal, marshal_record, marshal_to_json
from .unmarshal import Unmarshaler, unmarshal, unmarshal_from_json

__all__ = ["marshal", "marshal_record", "marshal_to_json", "Unmarshaler", "unmarshal", "unmarshal_from_json"]
