# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Typed model collection.

Provides a ``list`` that remembers the dataclass model of its elements so it
can be handed to :func:`~jsonapi_records.data.unmarshal.unmarshal` without
repeating the model.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional

from .schema import ModelSchema


class ModelCollection(list):
    """
    List of model instances of a single dataclass type.

    :param model: Dataclass type of the elements.
    :type model: type
    :param iterable: Initial elements.

    Example::

        articles = ModelCollection(Article)
        unmarshal(document, articles)
        first = articles.find("1")
    """

    def __init__(self, model: type, iterable: Iterable[Any] = ()) -> None:
        self._schema = ModelSchema.for_type(model)
        super().__init__(iterable)

    @property
    def model(self) -> type:
        return self._schema.model

    def ids(self) -> List[Optional[str]]:
        """
        Return the identifier of every element, rendered as a string.

        :return: Identifiers in collection order (``None`` for elements without one).
        :rtype: list[str | None]
        """
        return [self._schema.identifier_of(item) for item in self]

    def find(self, record_id: str) -> Optional[Any]:
        """
        Return the first element whose identifier equals ``record_id``.

        :param record_id: Identifier as it appears in a document.
        :type record_id: str
        :return: Matching element or None.
        """
        for item in self:
            if self._schema.identifier_of(item) == record_id:
                return item
        return None

    def __repr__(self) -> str:
        return f"ModelCollection({self.model.__name__}, {list.__repr__(self)})"


__all__ = ["ModelCollection"]
