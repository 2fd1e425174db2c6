# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Name translation between document keys and model field names.

Document keys follow the deployed key convention (``lowerCamelCase`` by
default, or ``snake_case``), model fields are always Python ``snake_case``
attributes and model types are ``UpperCamelCase`` class names:

- :func:`jsonify` turns a field or type name into a document key.
- :func:`dejsonify` turns a document key back into a field name.
- :func:`pluralize` / :func:`singularize` inflect the last word of a name.

All functions are pure and only depend on their arguments.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from ..common.constants import NAMING_CAMEL, NAMING_SNAKE

_WORD_RE = re.compile(r"[A-Z]+(?![a-z])\d*|[A-Z]?[a-z]+\d*|\d+")

_UNCOUNTABLES = frozenset(
    [
        "equipment",
        "information",
        "rice",
        "money",
        "species",
        "series",
        "fish",
        "sheep",
        "jeans",
        "police",
        "news",
        "metadata",
        "data",
    ]
)

_IRREGULARS = [
    ("person", "people"),
    ("man", "men"),
    ("woman", "women"),
    ("child", "children"),
    ("sex", "sexes"),
    ("move", "moves"),
    ("foot", "feet"),
    ("tooth", "teeth"),
    ("goose", "geese"),
    ("mouse", "mice"),
]

# Rules are tried top to bottom, first match wins.
_PLURAL_RULES: List[Tuple[re.Pattern, str]] = [
    (re.compile(r"(quiz)$", re.I), r"\1zes"),
    (re.compile(r"^(oxen)$", re.I), r"\1"),
    (re.compile(r"^(ox)$", re.I), r"\1en"),
    (re.compile(r"(matr|vert|ind)(?:ix|ex)$", re.I), r"\1ices"),
    (re.compile(r"(x|ch|ss|sh)$", re.I), r"\1es"),
    (re.compile(r"([^aeiouy]|qu)y$", re.I), r"\1ies"),
    (re.compile(r"(hive)$", re.I), r"\1s"),
    (re.compile(r"(?:([^f])fe|([lr])f)$", re.I), r"\1\2ves"),
    (re.compile(r"sis$", re.I), "ses"),
    (re.compile(r"([ti])a$", re.I), r"\1a"),
    (re.compile(r"([ti])um$", re.I), r"\1a"),
    (re.compile(r"(buffal|tomat|potat|her)o$", re.I), r"\1oes"),
    (re.compile(r"(bu)s$", re.I), r"\1ses"),
    (re.compile(r"(alias|status|campus)$", re.I), r"\1es"),
    (re.compile(r"(octop|vir)(?:us|i)$", re.I), r"\1i"),
    (re.compile(r"(ax|test)is$", re.I), r"\1es"),
    (re.compile(r"s$", re.I), "s"),
    (re.compile(r"$"), "s"),
]

_SINGULAR_RULES: List[Tuple[re.Pattern, str]] = [
    (re.compile(r"(quiz)zes$", re.I), r"\1"),
    (re.compile(r"(matr)ices$", re.I), r"\1ix"),
    (re.compile(r"(vert|ind)ices$", re.I), r"\1ex"),
    (re.compile(r"^(ox)en", re.I), r"\1"),
    (re.compile(r"(alias|status|campus)(es)?$", re.I), r"\1"),
    (re.compile(r"(octop|vir)(?:us|i)$", re.I), r"\1us"),
    (re.compile(r"^(a)x[ie]s$", re.I), r"\1xis"),
    (re.compile(r"(cris|test)(?:is|es)$", re.I), r"\1is"),
    (re.compile(r"(shoe)s$", re.I), r"\1"),
    (re.compile(r"(o)es$", re.I), r"\1"),
    (re.compile(r"(bus)(es)?$", re.I), r"\1"),
    (re.compile(r"(m|l)ice$", re.I), r"\1ouse"),
    (re.compile(r"(x|ch|ss|sh)es$", re.I), r"\1"),
    (re.compile(r"(m)ovies$", re.I), r"\1ovie"),
    (re.compile(r"(s)eries$", re.I), r"\1eries"),
    (re.compile(r"([^aeiouy]|qu)ies$", re.I), r"\1y"),
    (re.compile(r"([lr])ves$", re.I), r"\1f"),
    (re.compile(r"(tive)s$", re.I), r"\1"),
    (re.compile(r"(hive)s$", re.I), r"\1"),
    (re.compile(r"([^f])ves$", re.I), r"\1fe"),
    (re.compile(r"(^analy)(sis|ses)$", re.I), r"\1sis"),
    (re.compile(r"((a)naly|(b)a|(d)iagno|(p)arenthe|(p)rogno|(s)ynop|(t)he)(sis|ses)$", re.I), r"\1sis"),
    (re.compile(r"([ti])a$", re.I), r"\1um"),
    (re.compile(r"(n)ews$", re.I), r"\1ews"),
    (re.compile(r"(ss)$", re.I), r"\1"),
    (re.compile(r"s$", re.I), ""),
]


def split_words(name: str) -> List[str]:
    """
    Split a ``snake_case``, ``lowerCamelCase`` or ``UpperCamelCase`` name into words.

    Acronym runs stay together (``HTTPRequest`` -> ``["HTTP", "Request"]``) and
    trailing digits stay attached to their word (``line1`` -> ``["line1"]``).

    :param name: Identifier to split.
    :type name: ``str``
    :return: Words in their original casing.
    :rtype: ``list[str]``
    """
    return _WORD_RE.findall(name)


def _match_case(source: str, replacement: str) -> str:
    if source[:1].isupper():
        return replacement[:1].upper() + replacement[1:]
    return replacement


def _inflect(word: str, rules: List[Tuple[re.Pattern, str]], irregular_index: int) -> str:
    lowered = word.lower()
    if not word or lowered in _UNCOUNTABLES:
        return word
    for pair in _IRREGULARS:
        source, target = pair[1 - irregular_index], pair[irregular_index]
        if lowered == target:
            return word
        if lowered == source:
            return _match_case(word, target)
    for pattern, replacement in rules:
        if pattern.search(word):
            return pattern.sub(replacement, word, count=1)
    return word


def _inflect_last_word(name: str, rules: List[Tuple[re.Pattern, str]], irregular_index: int) -> str:
    words = split_words(name)
    if not words:
        return name
    last = words[-1]
    head = name[: name.rfind(last)]
    return head + _inflect(last, rules, irregular_index)


def pluralize(noun: str) -> str:
    """
    Return the English plural form of ``noun``.

    Only the last word of a compound name is inflected, so
    ``pluralize("blogPost") == "blogPosts"`` and
    ``pluralize("line_item") == "line_items"``.

    :param noun: Singular noun or compound name.
    :type noun: ``str``
    :return: Plural form.
    :rtype: ``str``
    """
    return _inflect_last_word(noun, _PLURAL_RULES, 1)


def singularize(noun: str) -> str:
    """
    Return the English singular form of ``noun``; the inverse of :func:`pluralize`.

    :param noun: Plural noun or compound name.
    :type noun: ``str``
    :return: Singular form.
    :rtype: ``str``
    """
    return _inflect_last_word(noun, _SINGULAR_RULES, 0)


def jsonify(name: str, naming: str = NAMING_CAMEL) -> str:
    """
    Convert a field name or type name to the document key convention.

    Examples (camel convention)::

        jsonify("published_at")  # "publishedAt"
        jsonify("BlogPost")      # "blogPost"
        jsonify("Article")       # "article"

    With ``naming="snake"`` the same inputs become ``published_at``,
    ``blog_post`` and ``article``.

    :param name: ``snake_case`` field name or ``UpperCamelCase`` type name.
    :type name: ``str``
    :param naming: Key convention, ``"camel"`` or ``"snake"``.
    :type naming: ``str``
    :return: Document key.
    :rtype: ``str``
    :raises ValueError: If ``naming`` is not a known convention.
    """
    words = split_words(name)
    if not words:
        return name
    if naming == NAMING_SNAKE:
        return "_".join(w.lower() for w in words)
    if naming == NAMING_CAMEL:
        return words[0].lower() + "".join(w[:1].upper() + w[1:].lower() for w in words[1:])
    raise ValueError(f"Unknown naming convention: {naming!r}")


def dejsonify(key: str) -> str:
    """
    Convert a document key back to a ``snake_case`` field name.

    This is the inverse of :func:`jsonify` for field names under either
    convention: ``dejsonify("publishedAt") == "published_at"`` and
    ``dejsonify("published_at") == "published_at"``.

    :param key: Document key.
    :type key: ``str``
    :return: Field name.
    :rtype: ``str``
    """
    words = split_words(key)
    if not words:
        return key
    return "_".join(w.lower() for w in words)


def root_key(type_name: str, naming: str = NAMING_CAMEL) -> str:
    """Document root key for a model type name (``Article`` -> ``articles``)."""
    return pluralize(jsonify(type_name, naming))


__all__ = ["split_words", "pluralize", "singularize", "jsonify", "dejsonify", "root_key"]
