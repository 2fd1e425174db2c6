# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Document to model binding.

Reads the record objects stored under a model's root key and upserts them
into a caller-owned list: a record whose ``"id"`` matches an element already
in the list updates that element in place, any other record is appended as a
new instance. Attributes, the identifier and relationship links are assigned
through the model's cached :class:`~jsonapi_records.models.schema.ModelSchema`.

Processing stops at the first error. Records handled before the failing one
stay applied; callers needing all-or-nothing semantics should bind into a
copy and swap it in on success.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Tuple, Union

from ..common.constants import DUPLICATES_ERROR, KEY_ID, KEY_LINKS, TO_MANY_SUFFIX, TO_ONE_SUFFIX
from ..core import _error_codes as codes
from ..core.config import UnmarshalConfig
from ..core.errors import ContractViolationError, DocumentError, IdentifierError, JsonApiError, LinkError
from ..models.collection import ModelCollection
from ..models.schema import KIND_SEQUENCE, FieldSlot, ModelSchema
from ..utils.naming import dejsonify, root_key, singularize


class Unmarshaler:
    """
    Binds decoded documents to lists of dataclass models.

    :param config: Optional configuration; defaults to :class:`~jsonapi_records.core.config.UnmarshalConfig`.
    :type config: ~jsonapi_records.core.config.UnmarshalConfig | None

    Example::

        articles = []
        Unmarshaler().unmarshal(document, articles, Article)
    """

    def __init__(self, config: Optional[UnmarshalConfig] = None) -> None:
        self._config = config or UnmarshalConfig()
        self._logger: Optional[logging.Logger] = None
        if self._config.enable_logging:
            self._logger = logging.getLogger(self._config.logger_name)
            self._logger.setLevel(self._config.log_level.upper())

    @property
    def config(self) -> UnmarshalConfig:
        return self._config

    def _log(self, level: int, msg: str, *args: Any) -> None:
        if self._logger is not None:
            self._logger.log(level, msg, *args)

    # ---------------------------------------------------------------- entry

    def unmarshal(self, document: Dict[str, Any], destination: List[Any], model: Optional[type] = None) -> None:
        """
        Upsert the records of ``document`` into ``destination``.

        :param document: Decoded document, a mapping containing the model's root key.
        :type document: dict[str, Any]
        :param destination: List of ``model`` instances, updated in place.
        :type destination: list
        :param model: Dataclass type of the elements. Optional when ``destination``
            is a :class:`~jsonapi_records.models.collection.ModelCollection`.
        :type model: type | None

        :raises ContractViolationError: If ``destination`` is not a list, ``model`` is not a
            non-frozen dataclass type, or an element of ``destination`` is not a ``model``.
        :raises JsonApiError: On the first malformed part of the document. The destination
            keeps every record processed before it.
        """
        schema = self._resolve_target(destination, model)
        working = list(destination)
        try:
            merged, appended = self._unmarshal_into(document, schema, working)
        except JsonApiError as exc:
            self._log(logging.WARNING, "Unmarshal into %s stopped: %s", schema.name, exc.message)
            raise
        finally:
            destination[:] = working
        self._log(
            logging.INFO,
            "Unmarshaled %d %s record(s): %d merged, %d appended",
            merged + appended,
            schema.name,
            merged,
            appended,
        )

    def _resolve_target(self, destination: Any, model: Optional[type]) -> ModelSchema:
        if not isinstance(destination, list):
            raise ContractViolationError(
                f"You must pass a list of dataclass instances to unmarshal(), got {type(destination).__name__}"
            )
        if isinstance(destination, ModelCollection):
            if model is not None and model is not destination.model:
                raise ContractViolationError(
                    f"Model {getattr(model, '__name__', model)!r} does not match collection model {destination.model.__name__}"
                )
            model = destination.model
        if model is None:
            raise ContractViolationError("A model type is required unless the destination is a ModelCollection")

        schema = ModelSchema.for_type(model)
        if schema.frozen:
            raise ContractViolationError(f"Cannot unmarshal into frozen dataclass {schema.name}")
        for item in destination:
            if not isinstance(item, schema.model):
                raise ContractViolationError(
                    f"Destination element of type {type(item).__name__} is not a {schema.name}"
                )
        return schema

    # ------------------------------------------------------------ records

    def _unmarshal_into(self, document: Any, schema: ModelSchema, working: List[Any]) -> Tuple[int, int]:
        if not isinstance(document, dict):
            raise DocumentError(
                f"Expected the root document to be an object, got {type(document).__name__}",
                subcode=codes.DOCUMENT_NOT_OBJECT,
            )

        root = root_key(schema.name, self._config.naming)
        records = document.get(root)
        if records is None:
            raise DocumentError(
                f"Expected root document to include a '{root}' key but it didn't",
                subcode=codes.DOCUMENT_ROOT_MISSING,
                details={"key": root, "model": schema.name},
            )
        if not isinstance(records, list):
            raise DocumentError(
                f"Expected a list under key '{root}'",
                subcode=codes.DOCUMENT_ROOT_NOT_LIST,
                details={"key": root, "model": schema.name},
            )

        index: Optional[Dict[str, Any]] = None
        merged = appended = 0
        for position, attributes in enumerate(records):
            if not isinstance(attributes, dict):
                raise DocumentError(
                    f"Expected a list of objects under key '{root}'",
                    subcode=codes.DOCUMENT_RECORD_NOT_OBJECT,
                    details={"key": root, "position": position},
                )

            record_id = attributes.get(KEY_ID)
            target = None
            if record_id is not None:
                if not isinstance(record_id, str):
                    raise DocumentError(
                        "id must be a string",
                        subcode=codes.DOCUMENT_ID_NOT_STRING,
                        details={"key": KEY_ID, "position": position, "model": schema.name},
                    )
                if index is None:
                    index = self._build_index(schema, working)
                target = index.get(record_id)

            is_new = target is None
            if is_new:
                target = schema.new()

            for key, value in attributes.items():
                if key == KEY_LINKS:
                    if not isinstance(value, dict):
                        raise DocumentError(
                            "Expected links to be an object",
                            subcode=codes.DOCUMENT_LINKS_NOT_OBJECT,
                            details={"key": KEY_LINKS, "position": position, "model": schema.name},
                        )
                    self.resolve_links(schema, target, value)
                elif key == KEY_ID:
                    if value is not None:
                        self.set_identifier(schema, target, value)
                else:
                    schema.require_field(dejsonify(key)).assign(target, value)

            if is_new:
                working.append(target)
                appended += 1
                if index is not None and record_id is not None:
                    index.setdefault(schema.identifier_of(target), target)
                self._log(logging.DEBUG, "Appended new %s (id=%s)", schema.name, record_id)
            else:
                merged += 1
                self._log(logging.DEBUG, "Merged %s id=%s in place", schema.name, record_id)
        return merged, appended

    def _build_index(self, schema: ModelSchema, working: List[Any]) -> Dict[str, Any]:
        index: Dict[str, Any] = {}
        for item in working:
            key = schema.identifier_of(item)
            if not key:
                continue
            if key in index:
                if self._config.duplicate_identifiers == DUPLICATES_ERROR:
                    raise IdentifierError(
                        f"Destination holds more than one {schema.name} with id '{key}'",
                        subcode=codes.IDENTIFIER_DUPLICATE,
                        details={"model": schema.name, "id": key},
                    )
                self._log(logging.WARNING, "Duplicate %s id '%s' in destination, merging into first", schema.name, key)
                continue
            index[key] = item
        return index

    # ------------------------------------------------------ ids and links

    def set_identifier(self, schema: ModelSchema, target: Any, value: Any) -> None:
        """
        Assign a document ``"id"`` to the identifier field of ``target``.

        :raises DocumentError: If ``value`` is not a string.
        :raises IdentifierError: If the model has no identifier field, the field is
            neither string- nor integer-typed, or ``value`` is not a base-10 integer
            for an integer field.
        """
        if not isinstance(value, str):
            raise DocumentError(
                "Expected id to be of type string",
                subcode=codes.DOCUMENT_ID_NOT_STRING,
                details={"key": KEY_ID, "model": schema.name},
            )
        slot = schema.identifier
        if slot is None:
            raise IdentifierError(
                f"Struct {schema.name} has no identifier field",
                subcode=codes.IDENTIFIER_FIELD_MISSING,
                details={"model": schema.name},
            )
        setattr(target, slot.name, slot.coerce_identifier(value))

    def resolve_links(self, schema: ModelSchema, target: Any, links: Dict[str, Any]) -> None:
        """
        Copy relationship identifiers from a links object onto ``target``.

        A string value sets the to-one field ``<name>_id``. A list of strings
        replaces the to-many field ``<singular name>_ids`` (or ``<name>_ids``)
        with a new list; it is never appended to.

        :raises LinkError: If a relationship field is missing, a to-many field is
            not a list, or a link value is neither a string nor a list of strings.
        :raises IdentifierError: If an identifier cannot be coerced to the field type.
        """
        for name, value in links.items():
            if isinstance(value, list):
                slot = self._to_many_slot(schema, name)
                ids = []
                for item in value:
                    if not isinstance(item, str):
                        raise LinkError(
                            f"Expected only strings in links array '{name}'",
                            subcode=codes.LINK_INVALID_VALUE,
                            details={"model": schema.name, "link": name},
                        )
                    ids.append(slot.element.coerce_identifier(item) if slot.element is not None else item)
                setattr(target, slot.name, ids)
            elif isinstance(value, str):
                field_name = dejsonify(name) + TO_ONE_SUFFIX
                slot = schema.field(field_name)
                if slot is None:
                    raise LinkError(
                        f"Expected struct {schema.name} to have a {field_name} field",
                        subcode=codes.LINK_FIELD_NOT_FOUND,
                        details={"model": schema.name, "link": name, "field": field_name},
                    )
                setattr(target, slot.name, slot.coerce_identifier(value))
            else:
                raise LinkError(
                    f"Expected string or array in links object for '{name}'",
                    subcode=codes.LINK_INVALID_VALUE,
                    details={"model": schema.name, "link": name},
                )

    def _to_many_slot(self, schema: ModelSchema, name: str) -> FieldSlot:
        base = dejsonify(name)
        candidates = [singularize(base) + TO_MANY_SUFFIX, base + TO_MANY_SUFFIX]
        for candidate in candidates:
            slot = schema.field(candidate)
            if slot is None:
                continue
            if slot.kind != KIND_SEQUENCE:
                raise LinkError(
                    f"Expected struct {schema.name} to have a {candidate} list",
                    subcode=codes.LINK_FIELD_NOT_LIST,
                    details={"model": schema.name, "link": name, "field": candidate},
                )
            return slot
        raise LinkError(
            f"Expected struct {schema.name} to have a {candidates[0]} list",
            subcode=codes.LINK_FIELD_NOT_FOUND,
            details={"model": schema.name, "link": name, "field": candidates[0]},
        )


def unmarshal(
    document: Dict[str, Any],
    destination: List[Any],
    model: Optional[type] = None,
    *,
    config: Optional[UnmarshalConfig] = None,
) -> None:
    """
    Upsert the records of a decoded document into ``destination``.

    Shortcut for ``Unmarshaler(config).unmarshal(document, destination, model)``.

    Example::

        articles = [Article(id="42", title="Old", body="kept")]
        unmarshal({"articles": [{"id": "42", "title": "New"}]}, articles, Article)
        # articles == [Article(id="42", title="New", body="kept")]
    """
    Unmarshaler(config).unmarshal(document, destination, model)


def unmarshal_from_json(
    data: Union[str, bytes, bytearray],
    destination: List[Any],
    model: Optional[type] = None,
    *,
    config: Optional[UnmarshalConfig] = None,
) -> None:
    """
    Decode a JSON document and upsert its records into ``destination``.

    :raises json.JSONDecodeError: If ``data`` is not valid JSON; raised as is.
    """
    document = json.loads(data)
    Unmarshaler(config).unmarshal(document, destination, model)


__all__ = ["Unmarshaler", "unmarshal", "unmarshal_from_json"]
