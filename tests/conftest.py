# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for the test suite.

This module provides common fixtures that can be used across all test modules.
"""

import copy

import pytest

from jsonapi_records.core.config import UnmarshalConfig
from tests.fixtures.test_data import SAMPLE_ARTICLES_DOCUMENT, SAMPLE_NEW_ARTICLES


@pytest.fixture
def test_config():
    """Configuration with logging enabled at DEBUG."""
    return UnmarshalConfig(enable_logging=True, log_level="DEBUG")


@pytest.fixture
def articles_document():
    """Deep copy of the sample articles document."""
    return copy.deepcopy(SAMPLE_ARTICLES_DOCUMENT)


@pytest.fixture
def new_articles_document():
    """Deep copy of the sample document holding records without ids."""
    return copy.deepcopy(SAMPLE_NEW_ARTICLES)
