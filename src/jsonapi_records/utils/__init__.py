# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Utilities for the package.

This module contains the name translator and the pandas adapter. The pandas
helpers are exported from the top-level ``jsonapi_records`` package.
"""

from .naming import dejsonify, jsonify, pluralize, root_key, singularize

__all__ = ["dejsonify", "jsonify", "pluralize", "root_key", "singularize"]
