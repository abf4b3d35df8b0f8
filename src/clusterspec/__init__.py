"""clusterspec: Resolve cluster specifiers to OpenAPI schemas.

This package turns a specifier such as 'version:v1.11.7',
'file:swagger.json' or 'url:https://api.example.com' into a ClusterSpec
that can return the matching Kubernetes OpenAPI document.

Example usage:
    import requests
    from clusterspec import parse_cluster_spec

    with requests.Session() as session:
        spec = parse_cluster_spec("version:v1.11.7", session=session)
        schema = spec.openapi()
"""

__version__ = "0.1.0"

from clusterspec.exceptions import (
    ClusterSpecError,
    InvalidSpecifierError,
    InvalidTemplateError,
    MissingClientError,
    OutputWriteError,
    PathResolutionError,
    SchemaParseError,
    SchemaReadError,
    SchemaUnavailableError,
    SpecNotImplementedError,
    TransportError,
    UnknownKindError,
    UnrecognizedVersionError,
)
from clusterspec.filesystem import FileSystem, MemoryFileSystem, OsFileSystem
from clusterspec.models import SpecKind, Specifier, parse_specifier
from clusterspec.remote import SCHEMA_URL_TEMPLATE, VersionSpec, release_ref, schema_url
from clusterspec.resolver import parse_cluster_spec
from clusterspec.spec import ClusterSpec, FileSpec, LiveSpec

__all__ = [
    # Version
    "__version__",
    # Resolution
    "parse_cluster_spec",
    "parse_specifier",
    "release_ref",
    "schema_url",
    "SCHEMA_URL_TEMPLATE",
    # Classes
    "ClusterSpec",
    "FileSpec",
    "LiveSpec",
    "VersionSpec",
    "SpecKind",
    "Specifier",
    "FileSystem",
    "MemoryFileSystem",
    "OsFileSystem",
    # Exceptions
    "ClusterSpecError",
    "InvalidSpecifierError",
    "UnknownKindError",
    "PathResolutionError",
    "SchemaReadError",
    "SchemaParseError",
    "SpecNotImplementedError",
    "MissingClientError",
    "TransportError",
    "UnrecognizedVersionError",
    "SchemaUnavailableError",
    "InvalidTemplateError",
    "OutputWriteError",
]
