"""Cluster spec capability and its local variants.

A ClusterSpec describes the API supported by some cluster. It can be read
from an OpenAPI document in a file, queried from a running API server, or
taken from the OpenAPI document published for a Kubernetes release (see
:mod:`clusterspec.remote`).
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from icecream import ic

from clusterspec.exceptions import SchemaParseError, SchemaReadError, SpecNotImplementedError
from clusterspec.filesystem import FileSystem, OsFileSystem


class ClusterSpec(ABC):
    """The API supported by some cluster.

    Implementations perform no I/O until one of the operations is called,
    and every call repeats the full retrieval.
    """

    @abstractmethod
    def openapi(self) -> bytes:
        """Return the raw OpenAPI schema document."""

    @abstractmethod
    def resource(self) -> str:
        """Return a human-readable identifier of the schema source."""

    @abstractmethod
    def version(self) -> str:
        """Return the version of the API described by the schema."""


def extract_version(document: bytes, source: str) -> str:
    """Read ``info.version`` from a JSON OpenAPI document.

    Only the ``{"info": {"version": ...}}`` shape is checked; the rest of
    the document is not validated.

    Args:
        document: The raw JSON document.
        source: Where the document came from, used in error messages.

    Returns:
        The version string, or an empty string if ``info`` or
        ``info.version`` is absent.

    Raises:
        SchemaParseError: If the document is not a JSON object, or if
            ``info`` / ``info.version`` have the wrong type.

    """
    try:
        spec: Any = json.loads(document)
    except (json.JSONDecodeError, UnicodeDecodeError) as err:
        raise SchemaParseError(f"OpenAPI schema '{source}' is not valid JSON: {err}") from err

    if not isinstance(spec, dict):
        raise SchemaParseError(
            f"OpenAPI schema '{source}' must be a JSON object (got {type(spec).__name__})"
        )

    info = spec.get("info")
    if info is None:
        return ""
    if not isinstance(info, dict):
        raise SchemaParseError(f"OpenAPI schema '{source}' has a non-object 'info' field")

    version = info.get("version")
    if version is None:
        return ""
    if not isinstance(version, str):
        raise SchemaParseError(f"OpenAPI schema '{source}' has a non-string 'info.version' field")

    return version


@dataclass(frozen=True, slots=True)
class FileSpec(ClusterSpec):
    """OpenAPI schema stored in a file.

    Attributes:
        path: Absolute path of the schema file.
        fs: Filesystem the file is read from.

    """

    path: str
    fs: FileSystem = field(default_factory=OsFileSystem, repr=False)

    def openapi(self) -> bytes:
        """Read the schema file.

        Raises:
            SchemaReadError: If the file cannot be read.

        """
        ic(self.path)
        try:
            return self.fs.read_bytes(self.path)
        except OSError as err:
            raise SchemaReadError(f"Failed to read OpenAPI schema '{self.path}': {err}") from err

    def resource(self) -> str:
        return self.path

    def version(self) -> str:
        """Return ``info.version`` of the schema file.

        Raises:
            SchemaReadError: If the file cannot be read.
            SchemaParseError: If the file is not JSON of the expected shape.

        """
        return extract_version(self.openapi(), source=self.path)


@dataclass(frozen=True, slots=True)
class LiveSpec(ClusterSpec):
    """OpenAPI schema served by a running API server.

    Retrieval from a live cluster is not supported yet; only the server
    URL is kept.
    """

    server_url: str

    def openapi(self) -> bytes:
        raise SpecNotImplementedError("Initializing from OpenAPI spec in live cluster is not implemented")

    def resource(self) -> str:
        return self.server_url

    def version(self) -> str:
        raise SpecNotImplementedError("Retrieving version spec in live cluster is not implemented")
