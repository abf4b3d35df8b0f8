"""Shared test fixtures for clusterspec tests."""

from unittest.mock import MagicMock

import pytest
import requests

from clusterspec.filesystem import MemoryFileSystem


@pytest.fixture
def make_response():
    """Factory for mock requests.Response objects usable as context managers."""

    def _make(status_code: int, content: bytes = b"") -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.content = content
        response.__enter__ = MagicMock(return_value=response)
        response.__exit__ = MagicMock(return_value=False)
        return response

    return _make


@pytest.fixture
def mock_session():
    """Mock requests.Session; configure ``get.side_effect`` per test."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def sample_schema():
    """Minimal OpenAPI document with a version."""
    return b'{"swagger": "2.0", "info": {"title": "Kubernetes", "version": "v1.11.7"}, "paths": {}}'


@pytest.fixture
def memory_fs(sample_schema):
    """In-memory filesystem with a few schema files."""
    return MemoryFileSystem(
        {
            "/specs/swagger.json": sample_schema,
            "/specs/versioned.json": b'{"info": {"version": "1.2.3"}}',
            "/specs/empty-object.json": b"{}",
            "/specs/broken.json": b'{"info": ',
        }
    )
