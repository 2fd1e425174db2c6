# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Subcode constants carried by :class:`~jsonapi_records.core.errors.JsonApiError`."""

# Document subcodes
DOCUMENT_ROOT_MISSING = "document_root_missing"
DOCUMENT_ROOT_NOT_LIST = "document_root_not_list"
DOCUMENT_RECORD_NOT_OBJECT = "document_record_not_object"
DOCUMENT_LINKS_NOT_OBJECT = "document_links_not_object"
DOCUMENT_ID_NOT_STRING = "document_id_not_string"
DOCUMENT_NOT_OBJECT = "document_not_object"

# Field subcodes
FIELD_NOT_FOUND = "field_not_found"
FIELD_TYPE_MISMATCH = "field_type_mismatch"

# Identifier subcodes
IDENTIFIER_INVALID_FORMAT = "identifier_invalid_format"
IDENTIFIER_UNSUPPORTED_TYPE = "identifier_unsupported_type"
IDENTIFIER_FIELD_MISSING = "identifier_field_missing"
IDENTIFIER_DUPLICATE = "identifier_duplicate"

# Link subcodes
LINK_FIELD_NOT_FOUND = "link_field_not_found"
LINK_FIELD_NOT_LIST = "link_field_not_list"
LINK_INVALID_VALUE = "link_invalid_value"

ALL_SUBCODES = {
    DOCUMENT_ROOT_MISSING,
    DOCUMENT_ROOT_NOT_LIST,
    DOCUMENT_RECORD_NOT_OBJECT,
    DOCUMENT_LINKS_NOT_OBJECT,
    DOCUMENT_ID_NOT_STRING,
    DOCUMENT_NOT_OBJECT,
    FIELD_NOT_FOUND,
    FIELD_TYPE_MISMATCH,
    IDENTIFIER_INVALID_FORMAT,
    IDENTIFIER_UNSUPPORTED_TYPE,
    IDENTIFIER_FIELD_MISSING,
    IDENTIFIER_DUPLICATE,
    LINK_FIELD_NOT_FOUND,
    LINK_FIELD_NOT_LIST,
    LINK_INVALID_VALUE,
}
