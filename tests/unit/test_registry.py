"""Unit tests for the type registry: indices and structural matching."""

import threading
from typing import Optional

import numpy
import pytest

from framebridge import registry as registry_module
from framebridge.constants import SchemaType, StorageTag
from framebridge.exc import UnsupportedTypeError
from framebridge.registry import TypeRegistry, get_registry
from framebridge.types import (
    BASE_TYPES, OPTIONAL_TYPES, ALL_TYPES,
    Scalar, Container, signature_of,
    Boolean, Byte, Short, Integer, Long, Float, Double,
    Timestamp, String, UUID, Category, UTF8,
    OptionDouble, OptionLong, OptionString, OptionUTF8,
)

STRING_KINDS = (String, UUID, Category, UTF8)
NON_STRING_BASES = [t for t in BASE_TYPES if t.runtime_class is not str]


class TestByRuntimeClass:
    @pytest.mark.parametrize("base", NON_STRING_BASES, ids=str)
    def test_unique_classes(self, registry, base):
        assert registry.by_runtime_class[base.runtime_class] is base

    def test_shared_string_class_last_wins(self, registry):
        assert registry.by_runtime_class[str] is UTF8

    def test_covers_base_types_only(self, registry):
        assert len(registry.by_runtime_class) == 9

    def test_aliases_not_indexed(self, registry):
        assert registry.get_by_runtime_class(float) is None
        assert registry.get_by_runtime_class(int) is None

    def test_miss_returns_none(self, registry):
        assert registry.get_by_runtime_class(complex) is None


class TestByStorageTag:
    def test_numeric_last_wins(self, registry):
        assert registry.by_storage_tag[StorageTag.NUM] is Double

    def test_string_last_wins(self, registry):
        assert registry.by_storage_tag[StorageTag.STR] is UTF8

    def test_unique_tags(self, registry):
        assert registry.by_storage_tag[StorageTag.TIME] is Timestamp
        assert registry.by_storage_tag[StorageTag.UUID] is UUID
        assert registry.by_storage_tag[StorageTag.CAT] is Category

    def test_raw_value_accepted(self, registry):
        assert registry.get_by_storage_tag(3) is Double

    def test_bad_tag_is_miss(self, registry):
        assert registry.get_by_storage_tag(StorageTag.BAD) is None

    def test_out_of_enum_is_miss(self, registry):
        assert registry.get_by_storage_tag(42) is None
        assert registry.get_by_storage_tag("NUM") is None

    def test_bool_is_miss(self, registry):
        assert registry.get_by_storage_tag(True) is None
        assert registry.get_by_storage_tag(False) is None
        assert registry.candidates_by_storage_tag(True) == ()

    def test_candidates_in_catalog_order(self, registry):
        assert registry.candidates_by_storage_tag(StorageTag.NUM) == (
            Boolean, Byte, Short, Integer, Long, Float, Double,
        )
        assert registry.candidates_by_storage_tag(StorageTag.STR) == (String, UTF8)

    def test_candidates_miss_is_empty(self, registry):
        assert registry.candidates_by_storage_tag(StorageTag.BAD) == ()
        assert registry.candidates_by_storage_tag(99) == ()


class TestBySchemaType:
    @pytest.mark.parametrize("schema_type, expected", [
        (SchemaType.BOOLEAN, Boolean),
        (SchemaType.BYTE, Byte),
        (SchemaType.SHORT, Short),
        (SchemaType.INTEGER, Integer),
        (SchemaType.LONG, Long),
        (SchemaType.FLOAT, Float),
        (SchemaType.DOUBLE, Double),
        (SchemaType.TIMESTAMP, Timestamp),
    ])
    def test_unique_schema_types(self, registry, schema_type, expected):
        assert registry.by_schema_type[schema_type] is expected

    def test_string_collision_pins_last_declared(self, registry):
        # String, UUID, Category and UTF8 all declare "string"; UTF8 is declared last
        assert registry.by_schema_type[SchemaType.STRING] is UTF8
        assert registry.get_by_schema_type("string") is UTF8

    def test_string_candidates(self, registry):
        assert registry.candidates_by_schema_type(SchemaType.STRING) == STRING_KINDS

    def test_last_of_string_uuid_category(self):
        narrowed = TypeRegistry([String, UUID, Category])
        assert narrowed.get_by_schema_type(SchemaType.STRING) is Category

    def test_raw_value_accepted(self, registry):
        assert registry.get_by_schema_type("double") is Double

    def test_unmapped_schema_type_is_miss(self, registry):
        assert registry.get_by_schema_type(SchemaType.DATE) is None
        assert registry.get_by_schema_type("decimal") is None

    def test_unknown_value_is_miss(self, registry):
        assert registry.get_by_schema_type("varchar") is None
        assert registry.candidates_by_schema_type("varchar") == ()


class TestByDisplayName:
    def test_option_double(self, registry):
        assert registry.by_display_name["Option[Double]"] == OptionDouble

    @pytest.mark.parametrize("descriptor", ALL_TYPES, ids=str)
    def test_round_trip(self, registry, descriptor):
        assert registry.by_display_name[str(descriptor)] == descriptor

    def test_covers_all_types(self, registry):
        assert len(registry.by_display_name) == len(ALL_TYPES)

    def test_miss_returns_none(self, registry):
        assert registry.get_by_name("Option[Decimal]") is None
        assert registry.get_by_name("double") is None

    def test_unhashable_name_is_miss(self, registry):
        assert registry.get_by_name(["Double"]) is None


class TestIndicesReadOnly:
    def test_cannot_mutate(self, registry):
        with pytest.raises(TypeError):
            registry.by_storage_tag[StorageTag.BAD] = Double
        with pytest.raises(TypeError):
            registry.by_display_name["Real"] = Float


class TestByType:
    @pytest.mark.parametrize("base", NON_STRING_BASES, ids=str)
    def test_runtime_class(self, registry, base):
        assert registry.by_type(Scalar(base.runtime_class)) is base

    def test_shared_string_class_first_wins(self, registry):
        for base in STRING_KINDS:
            assert registry.by_type(Scalar(base.runtime_class)) is String

    @pytest.mark.parametrize("alias, expected", [
        (bool, Boolean),
        (int, Long),
        (float, Double),
        (bytes, UTF8),
    ])
    def test_alias(self, registry, alias, expected):
        assert registry.by_type(Scalar(alias)) is expected

    @pytest.mark.parametrize("base", NON_STRING_BASES, ids=str)
    def test_optional_of_runtime_class(self, registry, base):
        found = registry.by_type(Container.optional(Scalar(base.runtime_class)))
        assert found == registry.optional_of(base)

    def test_optional_of_string(self, registry):
        assert registry.by_type(Container.optional(Scalar(str))) == OptionString

    def test_optional_of_alias(self, registry):
        assert registry.by_type(Container.optional(Scalar(bytes))) == OptionUTF8

    def test_annotation(self, registry):
        assert registry.by_type(Optional[float]) == OptionDouble
        assert registry.by_type(int | None) == OptionLong
        assert registry.by_annotation(numpy.int16) is Short

    def test_base_types_scanned_first(self, registry):
        assert registry.by_type(float) is Double

    def test_unsupported_scalar(self, registry):
        sig = Scalar(complex)
        with pytest.raises(UnsupportedTypeError) as info:
            registry.by_type(sig)
        assert info.value.signature == sig
        assert "complex" in str(info.value)

    def test_unsupported_two_argument_container(self, registry):
        with pytest.raises(UnsupportedTypeError) as info:
            registry.by_type(dict[str, int])
        assert info.value.signature == signature_of(dict[str, int])

    def test_unsupported_is_type_error(self, registry):
        with pytest.raises(TypeError):
            registry.by_type(Optional[complex])

    def test_bad_annotation_raises_type_error(self, registry):
        with pytest.raises(TypeError, match="Cannot derive"):
            registry.by_type("float")


class TestRegistryViews:
    def test_views(self, registry):
        assert registry.base_types == BASE_TYPES
        assert registry.optional_types == OPTIONAL_TYPES
        assert registry.all_types == ALL_TYPES
        assert list(registry) == list(ALL_TYPES)
        assert len(registry) == 24

    def test_contains(self, registry):
        assert Double in registry
        assert OptionDouble in registry
        assert "Double" not in registry

    def test_optional_of(self, registry):
        assert registry.optional_of(Double) is OptionDouble

    def test_optional_of_unregistered(self):
        narrowed = TypeRegistry([Double])
        assert narrowed.optional_of(Long) is None
        assert narrowed.optional_of(Double) == OptionDouble

    def test_custom_catalog(self):
        narrowed = TypeRegistry([Long, Double])
        assert len(narrowed) == 4
        assert narrowed.by_storage_tag[StorageTag.NUM] is Double
        with pytest.raises(UnsupportedTypeError):
            narrowed.by_type(bool)

    def test_repr(self, registry):
        assert repr(registry).startswith("TypeRegistry([Boolean, Byte")


class TestGetRegistry:
    def test_same_instance(self):
        assert get_registry() is get_registry()

    def test_concurrent_first_use_builds_once(self, monkeypatch):
        monkeypatch.setattr(registry_module, "_default_registry", None)
        built = []
        original_init = TypeRegistry.__init__

        def counting_init(self, *args, **kwargs):
            built.append(self)
            original_init(self, *args, **kwargs)

        monkeypatch.setattr(TypeRegistry, "__init__", counting_init)

        barrier = threading.Barrier(8)
        results = []

        def worker():
            barrier.wait()
            results.append(get_registry())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(built) == 1
        assert all(r is results[0] for r in results)
