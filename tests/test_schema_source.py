"""Tests for schema location resolution."""

import os

import pytest

from schemagate.errors.exceptions import SchemaLoadError
from schemagate.schemas.source import SchemaSource, file_url_to_path

BUNDLED = "classpath:schemas/order-request.schema.json"


@pytest.fixture
def source():
    return SchemaSource()


def test_reads_plain_path(source, schema_file):
    assert source.read(str(schema_file)) == schema_file.read_bytes()


def test_reads_file_url(source, schema_file):
    assert source.read(schema_file.as_uri()) == schema_file.read_bytes()
    assert source.read(f"file:{schema_file}") == schema_file.read_bytes()


def test_reads_bundled_resource(source):
    document = source.load(BUNDLED)
    assert document["title"] == "Order Request"
    assert "cityName" in document["properties"]["orderInfo"]["required"]


def test_missing_locations_are_not_found(source, tmp_path):
    assert source.read(str(tmp_path / "missing.json")) is None
    assert source.read((tmp_path / "missing.json").as_uri()) is None
    assert source.read("classpath:schemas/missing.json") is None
    assert source.read(None) is None


def test_directory_is_not_a_schema(source, tmp_path):
    assert source.read(str(tmp_path)) is None


def test_unparseable_candidate_is_not_found(source, tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    assert source.load(str(broken)) is None


def test_non_object_document_is_not_found(source, tmp_path):
    listed = tmp_path / "list.json"
    listed.write_text("[1, 2]", encoding="utf-8")
    assert source.load(str(listed)) is None


def test_resolve_prefers_primary(source, schema_file, tmp_path):
    other = tmp_path / "other.json"
    other.write_text('{"type": "string"}', encoding="utf-8")
    resolved = source.resolve(str(schema_file), str(other))
    assert resolved.location == str(schema_file)
    assert resolved.document["type"] == "object"


def test_resolve_records_fallback_location(source, schema_file, tmp_path):
    missing = str(tmp_path / "missing.json")
    resolved = source.resolve(missing, str(schema_file))
    assert resolved.location == str(schema_file)


def test_resolve_falls_back_when_primary_unparseable(source, schema_file, tmp_path):
    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")
    assert source.resolve(str(broken), str(schema_file)).location == str(schema_file)


def test_resolve_fails_when_nothing_resolves(source, tmp_path):
    with pytest.raises(SchemaLoadError):
        source.resolve(str(tmp_path / "a.json"), str(tmp_path / "b.json"))
    with pytest.raises(SchemaLoadError):
        source.resolve(str(tmp_path / "a.json"))


def test_last_modified_for_files(source, schema_file):
    os.utime(schema_file, (1_700_000_000, 1_700_000_000))
    assert source.last_modified(str(schema_file)) == 1_700_000_000
    assert source.last_modified(schema_file.as_uri()) == 1_700_000_000


def test_last_modified_missing_file_is_zero(source, tmp_path):
    assert source.last_modified(str(tmp_path / "missing.json")) == 0.0


def test_last_modified_bundled_is_now():
    assert SchemaSource(clock=lambda: 42.0).last_modified(BUNDLED) == 42.0


def test_file_url_to_path_forms(tmp_path):
    target = tmp_path / "with space.json"
    assert file_url_to_path(target.as_uri()) == target
    assert file_url_to_path(f"file:{tmp_path}/x.json") == tmp_path / "x.json"
