# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..common.constants import DUPLICATES_ERROR, DUPLICATES_FIRST, NAMING_CAMEL, NAMING_SNAKE


@dataclass(frozen=True)
class UnmarshalConfig:
    """
    Configuration settings for binding documents to models.

    :param naming: Document key convention, ``"camel"`` (default) or ``"snake"``.
    :type naming: str
    :param duplicate_identifiers: What to do when the destination holds several elements with the
        identifier of an incoming record: ``"first"`` (default) merges into the first one,
        ``"error"`` raises :class:`~jsonapi_records.core.errors.IdentifierError`.
    :type duplicate_identifiers: str
    :param enable_logging: Attach a logger to the unmarshaler (default: False).
    :type enable_logging: bool
    :param log_level: Level name for that logger (default: ``"WARNING"``).
    :type log_level: str
    :param logger_name: Name of that logger (default: ``"jsonapi_records"``).
    :type logger_name: str
    """
    naming: str = NAMING_CAMEL
    duplicate_identifiers: str = DUPLICATES_FIRST

    # Logging configuration
    enable_logging: bool = False
    log_level: str = "WARNING"
    logger_name: str = "jsonapi_records"

    def __post_init__(self) -> None:
        if self.naming not in (NAMING_CAMEL, NAMING_SNAKE):
            raise ValueError(f"naming must be 'camel' or 'snake', got {self.naming!r}")
        if self.duplicate_identifiers not in (DUPLICATES_FIRST, DUPLICATES_ERROR):
            raise ValueError(
                f"duplicate_identifiers must be 'first' or 'error', got {self.duplicate_identifiers!r}"
            )
        if not isinstance(self.log_level, str) or not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"log_level must be a logging level name, got {self.log_level!r}")

    @classmethod
    def from_env(cls) -> "UnmarshalConfig":
        """
        Create a configuration instance with default settings.

        :return: Configuration instance with default values.
        :rtype: ~jsonapi_records.core.config.UnmarshalConfig
        """
        return cls(
            naming=NAMING_CAMEL,
            duplicate_identifiers=DUPLICATES_FIRST,
            enable_logging=False,
            log_level="WARNING",
            logger_name="jsonapi_records",
        )
