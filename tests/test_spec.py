"""Tests for spec.py module."""

from unittest.mock import MagicMock

import pytest

from clusterspec.exceptions import SchemaParseError, SchemaReadError, SpecNotImplementedError
from clusterspec.spec import ClusterSpec, FileSpec, LiveSpec, extract_version


class TestExtractVersion:
    """Tests for reading info.version from a document."""

    def test_version_present(self):
        """Test the version field is returned."""
        assert extract_version(b'{"info": {"version": "1.2.3"}}', source="x") == "1.2.3"

    def test_empty_object(self):
        """Test a document without info yields an empty version."""
        assert extract_version(b"{}", source="x") == ""

    def test_info_without_version(self):
        """Test info without version yields an empty version."""
        assert extract_version(b'{"info": {"title": "k8s"}}', source="x") == ""

    def test_null_version(self):
        """Test a null version yields an empty version."""
        assert extract_version(b'{"info": {"version": null}}', source="x") == ""

    def test_invalid_json(self):
        """Test malformed JSON raises SchemaParseError."""
        with pytest.raises(SchemaParseError) as exc_info:
            extract_version(b'{"info": ', source="broken.json")
        assert "broken.json" in str(exc_info.value)

    @pytest.mark.parametrize("document", [b"[]", b"null", b'"text"', b"42"])
    def test_non_object_document(self, document):
        """Test a non-object top level raises SchemaParseError."""
        with pytest.raises(SchemaParseError):
            extract_version(document, source="x")

    def test_non_object_info(self):
        """Test a non-object info field raises SchemaParseError."""
        with pytest.raises(SchemaParseError):
            extract_version(b'{"info": "v1"}', source="x")

    def test_non_string_version(self):
        """Test a numeric version raises SchemaParseError."""
        with pytest.raises(SchemaParseError):
            extract_version(b'{"info": {"version": 1.2}}', source="x")


class TestFileSpec:
    """Tests for FileSpec."""

    def test_is_cluster_spec(self, memory_fs):
        """Test FileSpec implements the ClusterSpec interface."""
        assert isinstance(FileSpec(path="/specs/swagger.json", fs=memory_fs), ClusterSpec)

    def test_openapi_returns_file_content(self, memory_fs, sample_schema):
        """Test the raw file bytes are returned unchanged."""
        spec = FileSpec(path="/specs/swagger.json", fs=memory_fs)

        assert spec.openapi() == sample_schema

    def test_resource_is_path(self, memory_fs):
        """Test resource() returns the stored path."""
        assert FileSpec(path="/specs/swagger.json", fs=memory_fs).resource() == "/specs/swagger.json"

    def test_version(self, memory_fs):
        """Test version() reads info.version from the file."""
        assert FileSpec(path="/specs/versioned.json", fs=memory_fs).version() == "1.2.3"

    def test_version_empty_object(self, memory_fs):
        """Test version() of '{}' is an empty string, not an error."""
        assert FileSpec(path="/specs/empty-object.json", fs=memory_fs).version() == ""

    def test_version_invalid_json(self, memory_fs):
        """Test version() of malformed JSON raises SchemaParseError."""
        with pytest.raises(SchemaParseError):
            FileSpec(path="/specs/broken.json", fs=memory_fs).version()

    def test_openapi_missing_file(self, memory_fs):
        """Test a missing file raises SchemaReadError chained to the OSError."""
        spec = FileSpec(path="/specs/missing.json", fs=memory_fs)

        with pytest.raises(SchemaReadError) as exc_info:
            spec.openapi()
        assert "/specs/missing.json" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_version_missing_file(self, memory_fs):
        """Test version() propagates read failures."""
        with pytest.raises(SchemaReadError):
            FileSpec(path="/specs/missing.json", fs=memory_fs).version()

    def test_permission_error(self):
        """Test permission failures raise SchemaReadError."""
        fs = MagicMock()
        fs.read_bytes.side_effect = PermissionError(13, "Permission denied", "/secret.json")

        with pytest.raises(SchemaReadError) as exc_info:
            FileSpec(path="/secret.json", fs=fs).openapi()
        assert "Permission denied" in str(exc_info.value)

    def test_reads_on_every_call(self, memory_fs):
        """Test no content is cached between calls."""
        spec = FileSpec(path="/specs/versioned.json", fs=memory_fs)
        assert spec.version() == "1.2.3"

        memory_fs.write_bytes("/specs/versioned.json", b'{"info": {"version": "2.0.0"}}')

        assert spec.version() == "2.0.0"

    def test_reads_from_disk(self, tmp_path):
        """Test the default filesystem reads the local disk."""
        path = tmp_path / "swagger.json"
        path.write_bytes(b'{"info": {"version": "v1.9.0"}}')

        assert FileSpec(path=str(path)).version() == "v1.9.0"

    def test_is_immutable(self, memory_fs):
        """Test FileSpec fields cannot be reassigned."""
        spec = FileSpec(path="/specs/swagger.json", fs=memory_fs)

        with pytest.raises(AttributeError):
            spec.path = "/other.json"


class TestLiveSpec:
    """Tests for LiveSpec."""

    def test_resource_is_server_url(self):
        """Test resource() returns the URL unchanged."""
        assert LiveSpec(server_url="https://10.0.0.1:6443").resource() == "https://10.0.0.1:6443"

    def test_openapi_not_implemented(self):
        """Test openapi() always fails."""
        with pytest.raises(SpecNotImplementedError) as exc_info:
            LiveSpec(server_url="https://10.0.0.1:6443").openapi()
        assert "not implemented" in str(exc_info.value)

    def test_version_not_implemented(self):
        """Test version() always fails."""
        with pytest.raises(SpecNotImplementedError):
            LiveSpec(server_url="anything").version()
