# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Unit tests for ModelSchema and FieldSlot."""

import sys
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

import pytest

from jsonapi_records.core import _error_codes as codes
from jsonapi_records.core.errors import ContractViolationError, FieldError, IdentifierError
from jsonapi_records.models.schema import (
    KIND_ANY,
    KIND_BOOLEAN,
    KIND_FLOAT,
    KIND_INTEGER,
    KIND_MAPPING,
    KIND_NESTED,
    KIND_OBJECT,
    KIND_SEQUENCE,
    KIND_STRING,
    ModelSchema,
)
from tests.fixtures.test_data import Account, Address, Article, Author, Comment, Setting, Snapshot


class Color:
    pass


@dataclass
class Everything:
    s: str = ""
    i: int = 0
    f: float = 0.0
    b: bool = False
    seq: List[int] = field(default_factory=list)
    abc_seq: Sequence[str] = field(default_factory=list)
    m: Dict[str, Any] = field(default_factory=dict)
    n: Optional[Address] = None
    o: Optional[Color] = None
    a: Any = None
    u: Union[int, str] = 0


@dataclass
class TwoIds:
    left: str = field(default="", metadata={"jsonapi_id": True})
    right: str = field(default="", metadata={"jsonapi_id": True})


@dataclass(frozen=True)
class FrozenPoint:
    x: int
    y: int


@dataclass
class HasFrozen:
    point: FrozenPoint = field(default_factory=lambda: FrozenPoint(0, 0))


def test_kinds():
    schema = ModelSchema.for_type(Everything)
    kinds = {s.name: s.kind for s in schema.slots}
    assert kinds == {
        "s": KIND_STRING,
        "i": KIND_INTEGER,
        "f": KIND_FLOAT,
        "b": KIND_BOOLEAN,
        "seq": KIND_SEQUENCE,
        "abc_seq": KIND_SEQUENCE,
        "m": KIND_MAPPING,
        "n": KIND_NESTED,
        "o": KIND_OBJECT,
        "a": KIND_ANY,
        "u": KIND_ANY,
    }
    assert schema.field("n").optional is True
    assert schema.field("s").optional is False
    assert schema.field("seq").element.kind == KIND_INTEGER


def test_schema_is_cached():
    assert ModelSchema.for_type(Article) is ModelSchema.for_type(Article)


@pytest.mark.parametrize("model", [dict, Article(), "Article", 3])
def test_non_dataclass_rejected(model):
    with pytest.raises(ContractViolationError):
        ModelSchema.for_type(model)


def test_frozen_flag():
    assert ModelSchema.for_type(Snapshot).frozen is True
    assert ModelSchema.for_type(Article).frozen is False


def test_identifier_detection():
    assert ModelSchema.for_type(Article).identifier.name == "id"
    assert ModelSchema.for_type(Account).identifier.name == "account_number"
    assert ModelSchema.for_type(Setting).identifier is None


def test_two_identifier_markers_rejected():
    with pytest.raises(ContractViolationError):
        ModelSchema.for_type(TwoIds)


def test_new_zero_values():
    author = ModelSchema.for_type(Author).new()
    assert author == Author(name="", address=Address(street="", city=""))


def test_identifier_of():
    assert ModelSchema.for_type(Comment).identifier_of(Comment(id=12)) == "12"
    assert ModelSchema.for_type(Author).identifier_of(Author("a", Address("s", "c"))) is None
    with pytest.raises(IdentifierError) as exc:
        ModelSchema.for_type(Setting).identifier_of(Setting())
    assert exc.value.subcode == codes.IDENTIFIER_FIELD_MISSING


def test_identifier_of_unsupported_value():
    article = Article()
    article.id = 1.5
    with pytest.raises(IdentifierError) as exc:
        ModelSchema.for_type(Article).identifier_of(article)
    assert exc.value.subcode == codes.IDENTIFIER_UNSUPPORTED_TYPE


@pytest.mark.parametrize(
    "name, value",
    [
        ("s", 1),
        ("i", "1"),
        ("i", 1.0),
        ("f", "1.0"),
        ("f", False),
        ("b", 1),
        ("seq", "1,2"),
        ("seq", [1, "2"]),
        ("m", [1]),
        ("n", "address"),
        ("o", "red"),
    ],
)
def test_assign_rejects_mismatch(name, value):
    slot = ModelSchema.for_type(Everything).field(name)
    with pytest.raises(FieldError) as exc:
        slot.assign(Everything(), value)
    assert exc.value.subcode == codes.FIELD_TYPE_MISMATCH


def test_assign_accepts_matching_values():
    schema = ModelSchema.for_type(Everything)
    obj = Everything()
    color = Color()
    for name, value in [
        ("s", "x"),
        ("i", 3),
        ("f", 2),
        ("b", True),
        ("seq", [1, 2]),
        ("abc_seq", ["a"]),
        ("m", {"k": [1]}),
        ("n", {"street": "s", "city": "c"}),
        ("o", color),
        ("a", object),
        ("u", "text"),
    ]:
        schema.field(name).assign(obj, value)
    assert obj.n == Address("s", "c")
    assert obj.o is color
    assert obj.f == 2


def test_nested_unknown_key():
    with pytest.raises(FieldError) as exc:
        ModelSchema.for_type(Everything).field("n").assign(Everything(), {"zip": "1"})
    assert exc.value.subcode == codes.FIELD_NOT_FOUND


def test_nested_frozen_dataclass_built_through_constructor():
    obj = HasFrozen()
    ModelSchema.for_type(HasFrozen).field("point").assign(obj, {"x": 1, "y": 2})
    assert obj.point == FrozenPoint(1, 2)


def test_coerce_identifier():
    assert ModelSchema.for_type(Article).identifier.coerce_identifier("7") == "7"
    assert ModelSchema.for_type(Comment).identifier.coerce_identifier("007") == 7
    with pytest.raises(IdentifierError):
        ModelSchema.for_type(Comment).identifier.coerce_identifier("7.0")
    with pytest.raises(IdentifierError):
        ModelSchema.for_type(Comment).identifier.coerce_identifier("")


@pytest.mark.parametrize("value", ["42\n", " 42", "4 2", "\uff14\uff12"])
def test_coerce_identifier_rejects_padded_or_non_ascii_digits(value):
    with pytest.raises(IdentifierError) as exc:
        ModelSchema.for_type(Comment).identifier.coerce_identifier(value)
    assert exc.value.subcode == codes.IDENTIFIER_INVALID_FORMAT


def test_coerce_identifier_oversized_integer():
    slot = ModelSchema.for_type(Comment).identifier
    limit = getattr(sys, "get_int_max_str_digits", lambda: 0)()
    if not limit:
        pytest.skip("no integer string conversion limit")
    with pytest.raises(IdentifierError) as exc:
        slot.coerce_identifier("9" * (limit + 1))
    assert exc.value.subcode == codes.IDENTIFIER_INVALID_FORMAT


def test_require_field():
    schema = ModelSchema.for_type(Article)
    assert schema.require_field("title").name == "title"
    with pytest.raises(FieldError, match="Expected struct Article to have field subtitle"):
        schema.require_field("subtitle")
