# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

# Add src to PYTHONPATH for local runs
sys.path.append(str(Path(__file__).resolve().parents[2] / "src"))

from jsonapi_records import (
	FieldError,
	ModelCollection,
	UnmarshalConfig,
	marshal_to_json,
	unmarshal,
	unmarshal_from_json,
)


@dataclass
class Article:
	id: str = ""
	title: str = ""
	body: str = ""
	author_id: str = ""
	tag_ids: List[str] = field(default_factory=list)


def log_call(call: str) -> None:
	print({"call": call})


config = UnmarshalConfig(enable_logging=True, log_level="DEBUG")
articles = ModelCollection(Article)

# 1) Load two articles from raw JSON
payload = b"""
{
  "articles": [
    {"id": "1", "title": "Hello", "body": "First post", "links": {"author": "9", "tags": ["1", "2"]}},
    {"id": "2", "title": "Again", "links": {"author": "9"}}
  ]
}
"""
log_call("unmarshal_from_json(payload, articles)")
unmarshal_from_json(payload, articles, config=config)
print(articles)

# 2) Update article 1 in place and add a third one
log_call("unmarshal(update, articles)")
unmarshal(
	{"articles": [{"id": "1", "title": "Hello, edited", "links": {"tags": ["3"]}}, {"title": "Draft"}]},
	articles,
	config=config,
)
print(articles.find("1"))
print(f"{len(articles)} articles")

# 3) A document with an unknown attribute fails, earlier records stay applied
log_call("unmarshal(bad, articles)")
try:
	unmarshal({"articles": [{"id": "2", "title": "Kept"}, {"id": "4", "subtitle": "nope"}]}, articles, config=config)
except FieldError as ex:
	print(f"Rejected: {ex} ({ex.subcode})")
print(articles.find("2"))

# 4) Back to JSON
log_call("marshal_to_json(articles)")
print(marshal_to_json(articles, indent=2))
