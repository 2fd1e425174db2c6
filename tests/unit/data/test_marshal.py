# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Unit tests for model to document conversion."""

import json
import unittest

from jsonapi_records.core.errors import ContractViolationError
from jsonapi_records.data.marshal import marshal, marshal_record, marshal_to_json
from jsonapi_records.models.collection import ModelCollection
from jsonapi_records.models.schema import ModelSchema
from tests.fixtures.test_data import Address, Article, Author, BlogPost, Comment, Setting


class TestMarshal(unittest.TestCase):
    def test_attributes_id_and_links(self):
        doc = marshal([Article(id="1", title="Hi", published_at="2024", author_id="9", tag_ids=["3"])])

        self.assertEqual(list(doc), ["articles"])
        record = doc["articles"][0]
        self.assertEqual(record["id"], "1")
        self.assertEqual(record["title"], "Hi")
        self.assertEqual(record["publishedAt"], "2024")
        self.assertEqual(record["links"], {"author": "9", "tags": ["3"]})
        self.assertNotIn("authorId", record)
        self.assertNotIn("tagIds", record)

    def test_integer_ids_rendered_as_strings(self):
        doc = marshal([Comment(id=5, text="x", article_id=7, reply_ids=[8, 9])])
        record = doc["comments"][0]
        self.assertEqual(record["id"], "5")
        self.assertEqual(record["links"], {"article": "7", "replies": ["8", "9"]})

    def test_empty_identifier_omitted(self):
        record = marshal([Article(title="new")])["articles"][0]
        self.assertNotIn("id", record)

    def test_model_without_identifier(self):
        doc = marshal([Setting(key="k", value="v")])
        self.assertEqual(doc, {"settings": [{"key": "k", "value": "v"}]})

    def test_nested_dataclass_encoded_as_mapping(self):
        doc = marshal([Author(name="Ann", address=Address("Main 1", "Oslo"), id="a1", nick_names=["A"])])
        self.assertEqual(
            doc,
            {
                "authors": [
                    {
                        "id": "a1",
                        "name": "Ann",
                        "address": {"street": "Main 1", "city": "Oslo"},
                        "nickNames": ["A"],
                    }
                ]
            },
        )

    def test_snake_naming(self):
        doc = marshal([BlogPost(id="1", headline="h")], naming="snake")
        self.assertEqual(doc, {"blog_posts": [{"id": "1", "headline": "h"}]})

    def test_document_order_preserved(self):
        doc = marshal([BlogPost(id=str(i)) for i in range(3)])
        self.assertEqual([r["id"] for r in doc["blogPosts"]], ["0", "1", "2"])

    def test_empty_collection_uses_its_model(self):
        self.assertEqual(marshal(ModelCollection(Article)), {"articles": []})
        self.assertEqual(marshal([], Article), {"articles": []})

    def test_empty_list_without_model(self):
        with self.assertRaises(ContractViolationError):
            marshal([])

    def test_mixed_elements_rejected(self):
        with self.assertRaises(ContractViolationError):
            marshal([Article(), Comment()])

    def test_marshal_to_json(self):
        text = marshal_to_json([BlogPost(id="1", headline="h")], sort_keys=True)
        self.assertEqual(json.loads(text), {"blogPosts": [{"id": "1", "headline": "h"}]})

    def test_marshal_record(self):
        record = marshal_record(ModelSchema.for_type(BlogPost), BlogPost(id="3", headline="x"))
        self.assertEqual(record, {"id": "3", "headline": "x"})
