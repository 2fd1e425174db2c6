# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Model to document conversion.

The inverse of :mod:`~jsonapi_records.data.unmarshal`: a list of dataclass
instances becomes ``{"<root key>": [record, ...]}`` where ``*_id`` fields are
emitted as to-one links and ``*_ids`` fields as to-many links.
"""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List, Optional

from ..common.constants import KEY_ID, KEY_LINKS, NAMING_CAMEL, TO_MANY_SUFFIX, TO_ONE_SUFFIX
from ..core.errors import ContractViolationError
from ..models.collection import ModelCollection
from ..models.schema import KIND_NESTED, KIND_SEQUENCE, FieldSlot, ModelSchema
from ..utils.naming import jsonify, pluralize, root_key


def _encode_value(slot: Optional[FieldSlot], value: Any, naming: str) -> Any:
    if value is None or slot is None:
        return value
    if slot.kind == KIND_NESTED:
        return _encode_attributes(ModelSchema.for_type(slot.target), value, naming)
    if slot.kind == KIND_SEQUENCE:
        return [_encode_value(slot.element, item, naming) for item in value]
    if isinstance(value, dict):
        return dict(value)
    return value


def _encode_attributes(schema: ModelSchema, obj: Any, naming: str) -> Dict[str, Any]:
    return {jsonify(slot.name, naming): _encode_value(slot, getattr(obj, slot.name), naming) for slot in schema.slots}


def _link_name(field_name: str, naming: str) -> Optional[str]:
    if field_name.endswith(TO_MANY_SUFFIX):
        return pluralize(jsonify(field_name[: -len(TO_MANY_SUFFIX)], naming))
    if field_name.endswith(TO_ONE_SUFFIX):
        return jsonify(field_name[: -len(TO_ONE_SUFFIX)], naming)
    return None


def marshal_record(schema: ModelSchema, obj: Any, naming: str = NAMING_CAMEL) -> Dict[str, Any]:
    """
    Convert one model instance to a record object.

    :param schema: Schema of the instance's model.
    :param obj: Model instance.
    :param naming: Document key convention.
    :return: Record object with ``"id"``, attribute keys and ``"links"``.
    :rtype: dict[str, Any]
    """
    record: Dict[str, Any] = {}
    links: Dict[str, Any] = {}
    for slot in schema.slots:
        value = getattr(obj, slot.name)
        if schema.identifier is not None and slot.name == schema.identifier.name:
            if value is not None and value != "":
                record[KEY_ID] = str(value)
            continue
        link = _link_name(slot.name, naming)
        if link is not None:
            if value is None:
                continue
            if slot.kind == KIND_SEQUENCE:
                links[link] = [str(item) for item in value]
            else:
                links[link] = str(value)
            continue
        record[jsonify(slot.name, naming)] = _encode_value(slot, value, naming)
    if links:
        record[KEY_LINKS] = links
    return record


def marshal(models: Iterable[Any], model: Optional[type] = None, *, naming: str = NAMING_CAMEL) -> Dict[str, Any]:
    """
    Convert model instances to a document.

    :param models: Instances of a single dataclass model.
    :param model: Model type; inferred from a
        :class:`~jsonapi_records.models.collection.ModelCollection` or the first element.
    :type model: type | None
    :param naming: Document key convention, ``"camel"`` or ``"snake"``.
    :type naming: str
    :return: Document mapping the model's root key to its record objects.
    :rtype: dict[str, Any]
    :raises ContractViolationError: If the model cannot be determined or an
        element is not an instance of it.

    Example::

        marshal([Article(id="1", title="Hi", author_id="9")])
        # {"articles": [{"id": "1", "title": "Hi", "links": {"author": "9"}}]}
    """
    items: List[Any] = list(models)
    if model is None and isinstance(models, ModelCollection):
        model = models.model
    if model is None:
        if not items:
            raise ContractViolationError("Cannot infer the model of an empty list; pass model=")
        model = type(items[0])
    schema = ModelSchema.for_type(model)
    records = []
    for item in items:
        if not isinstance(item, schema.model):
            raise ContractViolationError(f"Element of type {type(item).__name__} is not a {schema.name}")
        records.append(marshal_record(schema, item, naming))
    return {root_key(schema.name, naming): records}


def marshal_to_json(models: Iterable[Any], model: Optional[type] = None, *, naming: str = NAMING_CAMEL, **kwargs: Any) -> str:
    """Convert model instances to a JSON document string; extra keyword arguments go to :func:`json.dumps`."""
    return json.dumps(marshal(models, model, naming=naming), **kwargs)


__all__ = ["marshal", "marshal_record", "marshal_to_json"]
