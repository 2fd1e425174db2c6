# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Sample models and documents for the test suite.

This module contains reusable dataclass models and decoded documents
that can be used across different test modules.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Article:
    id: str = ""
    title: str = ""
    body: str = ""
    views: int = 0
    rating: float = 0.0
    published: bool = False
    published_at: Optional[str] = None
    author_id: str = ""
    tag_ids: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Comment:
    id: int = 0
    text: str = ""
    article_id: int = 0
    reply_ids: List[int] = field(default_factory=list)


@dataclass
class Address:
    street: str
    city: str


@dataclass
class Author:
    name: str
    address: Address
    id: Optional[str] = None
    nick_names: List[str] = field(default_factory=list)


@dataclass
class Category:
    id: str = ""
    label: str = ""


@dataclass
class BlogPost:
    id: str = ""
    headline: str = ""


@dataclass
class Account:
    account_number: str = field(default="", metadata={"jsonapi_id": True})
    name: str = ""


@dataclass
class Setting:
    key: str = ""
    value: str = ""


@dataclass(frozen=True)
class Snapshot:
    id: str = ""
    taken_at: str = ""


# Two new articles, no ids
SAMPLE_NEW_ARTICLES = {
    "articles": [
        {"title": "First", "views": 1},
        {"title": "Second", "views": 2},
    ]
}

# Articles with ids, attributes and links
SAMPLE_ARTICLES_DOCUMENT = {
    "articles": [
        {
            "id": "1",
            "title": "Hello",
            "body": "World",
            "views": 10,
            "rating": 4.5,
            "published": True,
            "publishedAt": "2024-01-02T03:04:05Z",
            "links": {"author": "9", "tags": ["3", "4"]},
        },
        {
            "id": "2",
            "title": "Again",
            "links": {"tags": []},
        },
    ]
}

SAMPLE_COMMENTS_DOCUMENT = {
    "comments": [
        {"id": "100", "text": "Nice", "links": {"article": "1", "replies": ["101", "102"]}},
    ]
}
