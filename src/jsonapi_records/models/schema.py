# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Schema descriptors for dataclass models.

A :class:`ModelSchema` is built once per dataclass type and cached. It lists
the model's :class:`FieldSlot` objects, each tagged with a *kind* from a fixed
table (string, integer, float, boolean, sequence, mapping, nested, object,
any). Slots validate decoded JSON values against their kind before assigning
them, so a document can never put a ``str`` into an ``int`` field.
"""

from __future__ import annotations

import collections.abc
import dataclasses
import re
import threading
import types
import typing
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from ..common.constants import IDENTIFIER_FIELD, METADATA_ID
from ..core import _error_codes as codes
from ..core.errors import ContractViolationError, FieldError, IdentifierError
from ..utils.naming import dejsonify

KIND_STRING = "string"
KIND_INTEGER = "integer"
KIND_FLOAT = "float"
KIND_BOOLEAN = "boolean"
KIND_SEQUENCE = "sequence"
KIND_MAPPING = "mapping"
KIND_NESTED = "nested"
KIND_OBJECT = "object"
KIND_ANY = "any"

_UNION_TYPES: Tuple[Any, ...] = (Union,)
if hasattr(types, "UnionType"):
    _UNION_TYPES = (Union, types.UnionType)

_SEQUENCE_ORIGINS = (list, collections.abc.Sequence, collections.abc.MutableSequence)
_MAPPING_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


_CHECKS = {
    KIND_STRING: lambda v: isinstance(v, str),
    KIND_INTEGER: _is_integer,
    KIND_FLOAT: _is_number,
    KIND_BOOLEAN: lambda v: isinstance(v, bool),
    KIND_MAPPING: lambda v: isinstance(v, dict),
    KIND_ANY: lambda v: True,
}

_ZEROS = {
    KIND_STRING: str,
    KIND_INTEGER: int,
    KIND_FLOAT: float,
    KIND_BOOLEAN: bool,
    KIND_SEQUENCE: list,
    KIND_MAPPING: dict,
}


def _type_label(value: Any) -> str:
    return "null" if value is None else type(value).__name__


@dataclass(frozen=True)
class FieldSlot:
    """
    One assignable field of a model.

    :param name: Attribute name on the model.
    :param kind: One of the ``KIND_*`` constants.
    :param optional: Whether ``None`` is an accepted value.
    :param element: Slot describing list elements (sequence kind only).
    :param target: Nested dataclass type (nested kind) or class checked with ``isinstance`` (object kind).
    :param owner: Name of the model class declaring the field.
    """

    name: str
    kind: str
    optional: bool = False
    element: Optional["FieldSlot"] = None
    target: Optional[type] = None
    owner: str = ""
    init: bool = True
    required: bool = False

    def convert(self, value: Any) -> Any:
        """
        Validate ``value`` for this slot and return what should be stored.

        Scalars are returned unchanged; lists are copied element by element and
        mappings destined for a nested dataclass are turned into an instance.

        :raises FieldError: If the runtime type of ``value`` does not fit the slot.
        """
        if value is None:
            if self.optional or self.kind == KIND_ANY:
                return None
            raise self._mismatch(value)

        if self.kind == KIND_SEQUENCE:
            if not isinstance(value, list):
                raise self._mismatch(value)
            if self.element is None:
                return list(value)
            return [self.element.convert(item) for item in value]

        if self.kind == KIND_NESTED:
            if not isinstance(value, dict):
                raise self._mismatch(value)
            return ModelSchema.for_type(self.target).build(value)

        if self.kind == KIND_OBJECT:
            if not isinstance(value, self.target):
                raise self._mismatch(value)
            return value

        if not _CHECKS[self.kind](value):
            raise self._mismatch(value)
        return value

    def assign(self, obj: Any, value: Any) -> None:
        """Validate ``value`` and set it on ``obj``."""
        setattr(obj, self.name, self.convert(value))

    def zero(self) -> Any:
        """Zero value for the slot, used to fill required constructor arguments."""
        if self.optional or self.kind in (KIND_ANY, KIND_OBJECT):
            return None
        if self.kind == KIND_NESTED:
            return ModelSchema.for_type(self.target).new()
        return _ZEROS[self.kind]()

    def coerce_identifier(self, value: str) -> Any:
        """
        Convert an identifier string to this slot's declared type.

        String slots take the value as is; integer slots parse it as a base-10
        integer.

        :raises IdentifierError: If the string is not an integer for an integer
            slot, or the slot is neither string- nor integer-typed.
        """
        if self.kind == KIND_STRING:
            return value
        if self.kind == KIND_INTEGER:
            if not isinstance(value, str) or not _INTEGER_RE.fullmatch(value):
                raise self._invalid_identifier(value)
            try:
                return int(value, 10)
            except ValueError:
                # digit strings past the interpreter's int conversion limit
                raise self._invalid_identifier(value) from None
        raise IdentifierError(
            f"Unsupported identifier field type '{self.kind}' for '{self.name}' on {self.owner}",
            subcode=codes.IDENTIFIER_UNSUPPORTED_TYPE,
            details={"model": self.owner, "field": self.name, "kind": self.kind},
        )

    def _invalid_identifier(self, value: Any) -> IdentifierError:
        return IdentifierError(
            f"Invalid identifier {value!r} for integer field '{self.name}' on {self.owner}",
            subcode=codes.IDENTIFIER_INVALID_FORMAT,
            details={"model": self.owner, "field": self.name, "value": value},
        )

    def _mismatch(self, value: Any) -> FieldError:
        return FieldError(
            f"Cannot assign {_type_label(value)} to {self.kind} field '{self.name}' on {self.owner}",
            subcode=codes.FIELD_TYPE_MISMATCH,
            details={"model": self.owner, "field": self.name, "kind": self.kind, "value_type": _type_label(value)},
        )


def _slot_for(name: str, hint: Any, owner: str, *, init: bool = True, required: bool = False) -> FieldSlot:
    optional = False
    origin = typing.get_origin(hint)
    if origin in _UNION_TYPES:
        args = typing.get_args(hint)
        members = [a for a in args if a is not type(None)]
        optional = len(members) < len(args)
        if len(members) != 1:
            return FieldSlot(name, KIND_ANY, optional=True, owner=owner, init=init, required=required)
        hint = members[0]
        origin = typing.get_origin(hint)

    common = dict(optional=optional, owner=owner, init=init, required=required)

    if hint is Any:
        return FieldSlot(name, KIND_ANY, **common)
    if hint is str:
        return FieldSlot(name, KIND_STRING, **common)
    if hint is bool:
        return FieldSlot(name, KIND_BOOLEAN, **common)
    if hint is int:
        return FieldSlot(name, KIND_INTEGER, **common)
    if hint is float:
        return FieldSlot(name, KIND_FLOAT, **common)
    if hint is list or origin in _SEQUENCE_ORIGINS:
        args = typing.get_args(hint)
        element = _slot_for(f"{name}[]", args[0], owner) if args else None
        return FieldSlot(name, KIND_SEQUENCE, element=element, **common)
    if hint is dict or origin in _MAPPING_ORIGINS:
        return FieldSlot(name, KIND_MAPPING, **common)
    if isinstance(hint, type) and dataclasses.is_dataclass(hint):
        return FieldSlot(name, KIND_NESTED, target=hint, **common)
    if isinstance(hint, type):
        return FieldSlot(name, KIND_OBJECT, target=hint, **common)
    return FieldSlot(name, KIND_ANY, **common)


class ModelSchema:
    """
    Cached field layout of one dataclass model.

    Use :meth:`for_type` rather than the constructor so that each model class
    is introspected only once.

    Example::

        schema = ModelSchema.for_type(Article)
        slot = schema.field("title")
        article = schema.new()
        slot.assign(article, "Hello")
    """

    _cache: Dict[type, "ModelSchema"] = {}
    _lock = threading.Lock()

    def __init__(self, model: type) -> None:
        if not isinstance(model, type) or not dataclasses.is_dataclass(model):
            raise ContractViolationError(f"Expected a dataclass type, got {model!r}")
        self.model = model
        self.name = model.__name__
        self.frozen = bool(model.__dataclass_params__.frozen)

        try:
            hints = typing.get_type_hints(model)
        except NameError as exc:
            raise ContractViolationError(f"Cannot resolve field annotations of {self.name}: {exc}") from exc

        self._slots: Dict[str, FieldSlot] = {}
        id_candidates: List[str] = []
        for f in dataclasses.fields(model):
            required = (
                f.init
                and f.default is dataclasses.MISSING
                and f.default_factory is dataclasses.MISSING  # type: ignore[misc]
            )
            self._slots[f.name] = _slot_for(f.name, hints.get(f.name, Any), self.name, init=f.init, required=required)
            if f.metadata.get(METADATA_ID):
                id_candidates.append(f.name)

        if len(id_candidates) > 1:
            raise ContractViolationError(f"{self.name} marks more than one identifier field: {id_candidates}")
        if id_candidates:
            self.identifier: Optional[FieldSlot] = self._slots[id_candidates[0]]
        else:
            self.identifier = self._slots.get(IDENTIFIER_FIELD)

    @classmethod
    def for_type(cls, model: type) -> "ModelSchema":
        """
        Return the cached schema for ``model``, building it on first use.

        :raises ContractViolationError: If ``model`` is not a dataclass type.
        """
        if not isinstance(model, type) or not dataclasses.is_dataclass(model):
            raise ContractViolationError(f"Expected a dataclass type, got {model!r}")
        schema = cls._cache.get(model)
        if schema is None:
            with cls._lock:
                schema = cls._cache.get(model)
                if schema is None:
                    schema = cls(model)
                    cls._cache[model] = schema
        return schema

    @property
    def slots(self) -> List[FieldSlot]:
        return list(self._slots.values())

    def field(self, name: str) -> Optional[FieldSlot]:
        return self._slots.get(name)

    def require_field(self, name: str) -> FieldSlot:
        """
        Look up a field that must exist.

        :raises FieldError: If the model has no field ``name``.
        """
        slot = self._slots.get(name)
        if slot is None:
            raise FieldError(
                f"Expected struct {self.name} to have field {name}",
                subcode=codes.FIELD_NOT_FOUND,
                details={"model": self.name, "field": name},
            )
        return slot

    def new(self) -> Any:
        """Create a zero-valued instance: every required argument gets its kind's zero value."""
        kwargs = {s.name: s.zero() for s in self._slots.values() if s.required}
        return self.model(**kwargs)

    def build(self, attributes: Dict[str, Any]) -> Any:
        """
        Create an instance from a mapping of document keys.

        Keys are translated with :func:`~jsonapi_records.utils.naming.dejsonify`.
        Works for frozen dataclasses since values are passed to the constructor.

        :raises FieldError: For unknown keys or mismatched value types.
        """
        kwargs = {s.name: s.zero() for s in self._slots.values() if s.required}
        late: Dict[str, Any] = {}
        for key, value in attributes.items():
            slot = self.require_field(dejsonify(key))
            if slot.init:
                kwargs[slot.name] = slot.convert(value)
            else:
                late[slot.name] = slot.convert(value)
        obj = self.model(**kwargs)
        for name, value in late.items():
            setattr(obj, name, value)
        return obj

    def identifier_of(self, obj: Any) -> Optional[str]:
        """
        Read the identifier of ``obj`` as a string.

        Integer identifiers are rendered in base 10. ``None`` means the element
        has no identifier and never matches a document ``"id"``.

        :raises IdentifierError: If the model has no identifier field or the
            stored value is neither a string nor an integer.
        """
        if self.identifier is None:
            raise IdentifierError(
                f"Struct {self.name} has no identifier field",
                subcode=codes.IDENTIFIER_FIELD_MISSING,
                details={"model": self.name},
            )
        value = getattr(obj, self.identifier.name)
        if value is None or isinstance(value, str):
            return value
        if _is_integer(value):
            return str(value)
        raise IdentifierError(
            f"Unsupported identifier value of type {type(value).__name__} on {self.name}",
            subcode=codes.IDENTIFIER_UNSUPPORTED_TYPE,
            details={"model": self.name, "field": self.identifier.name},
        )


__all__ = [
    "FieldSlot",
    "ModelSchema",
    "KIND_STRING",
    "KIND_INTEGER",
    "KIND_FLOAT",
    "KIND_BOOLEAN",
    "KIND_SEQUENCE",
    "KIND_MAPPING",
    "KIND_NESTED",
    "KIND_OBJECT",
    "KIND_ANY",
]
