# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Model introspection and typed collections.

- :class:`~jsonapi_records.models.schema.ModelSchema`: cached field layout of a dataclass model.
- :class:`~jsonapi_records.models.collection.ModelCollection`: list that remembers its model.

Note:
    This ``__init__.py`` does NOT import/export models.
    Import directly from the specific module files.
"""

__all__ = []
