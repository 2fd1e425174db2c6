# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Constants for JSON:API-style documents.

These constants define the reserved keys of a Record Object and the field
naming conventions used to bind relationships onto model classes.
"""

# Reserved keys inside a Record Object
KEY_ID = "id"
KEY_LINKS = "links"

# Field suffixes for relationship foreign keys
TO_ONE_SUFFIX = "_id"
"""Suffix of the field holding a to-one relationship (``author`` -> ``author_id``)."""

TO_MANY_SUFFIX = "_ids"
"""Suffix of the field holding a to-many relationship (``tags`` -> ``tag_ids``)."""

# Dataclass field metadata
METADATA_ID = "jsonapi_id"
"""Set ``field(metadata={METADATA_ID: True})`` to mark a non-``id`` field as the identifier."""

IDENTIFIER_FIELD = "id"

# Naming conventions for document keys
NAMING_CAMEL = "camel"
NAMING_SNAKE = "snake"

# Duplicate identifier policies
DUPLICATES_FIRST = "first"
DUPLICATES_ERROR = "error"
