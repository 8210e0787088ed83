# SPDX-FileCopyrightText: 2026 The controlcollection authors
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

from controlcollection import KeyedOrderedCollection, config, log
from controlcollection.config import CollectionSettings
from controlcollection.errors import (
    DuplicateKeyError,
    ErrorCategory,
    IndexOutOfRangeError,
    InvalidArgumentError,
    categorize_exception,
    error_category_to_reason,
)


def test_collection_settings_default(monkeypatch):
    monkeypatch.delenv("CONTROLCOLLECTION_COPY_DROPS_LAST", raising=False)
    settings = config.load_collection_settings()
    assert settings.copy_drops_last is False


def test_collection_settings_truthy_variants(monkeypatch):
    for value in ("1", "true", "YES", " on "):
        monkeypatch.setenv("CONTROLCOLLECTION_COPY_DROPS_LAST", value)
        assert config.load_collection_settings().copy_drops_last is True

    monkeypatch.setenv("CONTROLCOLLECTION_COPY_DROPS_LAST", "nope")
    assert config.load_collection_settings().copy_drops_last is False


def test_env_selects_copy_variant_at_call_time(monkeypatch):
    source = KeyedOrderedCollection()
    source.add("a", object())
    source.add("b", object())

    monkeypatch.setenv("CONTROLCOLLECTION_COPY_DROPS_LAST", "true")
    assert KeyedOrderedCollection(source).keys() == ["a"]

    monkeypatch.setenv("CONTROLCOLLECTION_COPY_DROPS_LAST", "false")
    assert KeyedOrderedCollection(source).keys() == ["a", "b"]

    # Explicit arguments win over the environment.
    monkeypatch.setenv("CONTROLCOLLECTION_COPY_DROPS_LAST", "true")
    assert source.copy(drop_last=False).keys() == ["a", "b"]
    explicit = KeyedOrderedCollection(source, settings=CollectionSettings(copy_drops_last=False))
    assert explicit.keys() == ["a", "b"]


def test_package_logger_has_null_handler():
    package_logger = log.get_logger()
    assert package_logger.name == "controlcollection"
    assert any(isinstance(handler, logging.NullHandler) for handler in package_logger.handlers)
    assert log.get_logger("controlcollection.collection").parent is package_logger
    assert log.get_logger("store").name == "controlcollection.store"


def test_set_log_level_reads_env_at_call_time(monkeypatch):
    package_logger = log.get_logger()
    original = package_logger.level
    try:
        monkeypatch.setenv("CONTROLCOLLECTION_LOG_LEVEL", "debug")
        assert log.set_log_level() is package_logger
        assert package_logger.level == logging.DEBUG

        log.set_log_level("bogus")
        assert package_logger.level == logging.WARNING

        log.set_log_level(logging.INFO)
        assert package_logger.level == logging.INFO
    finally:
        package_logger.setLevel(original)


def test_membership_changes_are_logged_at_debug(caplog):
    collection = KeyedOrderedCollection()
    with caplog.at_level(logging.DEBUG, logger="controlcollection.collection"):
        collection.add("k", object())
        collection.remove("k")
    messages = [record.getMessage() for record in caplog.records]
    assert "Added 'k'" in messages
    assert "Removed 'k'" in messages


def test_categorize_exception():
    assert categorize_exception(DuplicateKeyError("a")) is ErrorCategory.DUPLICATE_KEY
    assert categorize_exception(InvalidArgumentError("key")) is ErrorCategory.INVALID_ARGUMENT
    assert categorize_exception(IndexOutOfRangeError(3, 1)) is ErrorCategory.INDEX_OUT_OF_RANGE
    assert categorize_exception(IndexError("plain")) is ErrorCategory.INDEX_OUT_OF_RANGE
    assert categorize_exception(RuntimeError("x")) is ErrorCategory.UNKNOWN_ERROR
    assert categorize_exception(None) is ErrorCategory.NONE


def test_error_category_to_reason():
    assert error_category_to_reason(ErrorCategory.DUPLICATE_KEY) == "Key already exists in collection"
    assert error_category_to_reason(ErrorCategory.NONE) == ""
    assert error_category_to_reason(None) == ""


def test_error_messages():
    assert "'a'" in str(DuplicateKeyError("a"))
    err = IndexOutOfRangeError(5, 2)
    assert (err.index, err.count) == (5, 2)
    assert "5" in str(err)
