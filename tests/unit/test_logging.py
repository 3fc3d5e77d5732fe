"""Unit tests for logging integration."""

import logging

import pytest

from framebridge.exc import UnsupportedTypeError
from framebridge.registry import TypeRegistry
from framebridge.schema import FrameSchema
from framebridge.types import Scalar, String, UUID, Long


class TestRegistryLogging:
    def test_build_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="framebridge.registry"):
            TypeRegistry()
        assert any("built type registry" in r.message for r in caplog.records)

    def test_collision_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="framebridge.registry"):
            TypeRegistry([String, UUID])
        assert any("UUID replaces String" in r.message for r in caplog.records)

    def test_no_collision_no_log(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="framebridge.registry"):
            TypeRegistry([Long])
        assert not any("replaces" in r.message for r in caplog.records)

    def test_unsupported_logged(self, registry, caplog):
        with caplog.at_level(logging.DEBUG, logger="framebridge.registry"):
            with pytest.raises(UnsupportedTypeError):
                registry.by_type(Scalar(complex))
        assert any("no supported type matches complex" in r.message for r in caplog.records)


class TestSchemaLogging:
    def test_storage_collision_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="framebridge.schema"):
            FrameSchema.from_storage_tags({"x": 3})
        assert any("resolved to Double of 7 candidates" in r.message for r in caplog.records)


class TestLoggerNames:
    def test_logger_names(self):
        assert logging.getLogger("framebridge.registry").name == "framebridge.registry"
        assert logging.getLogger("framebridge.schema") is not None
        assert logging.getLogger("framebridge.config") is not None
