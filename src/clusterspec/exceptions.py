"""Custom exceptions for clusterspec.

This module defines the exception hierarchy raised while resolving a
cluster specifier and retrieving its OpenAPI schema document.
"""


class ClusterSpecError(Exception):
    """Base exception for all clusterspec errors.

    Every error raised by this package inherits from this class, so the
    command-line interface (or any other caller) can report all of them
    with a single except clause.
    """

    pass


class InvalidSpecifierError(ClusterSpecError):
    """Raised when a specifier is not of the form ``<kind>:<value>``.

    This can occur when:
    - The specifier contains no ``:`` separator
    - The value after the separator is empty
    """

    pass


class UnknownKindError(ClusterSpecError):
    """Raised when the specifier kind is not ``version``, ``file`` or ``url``."""

    pass


class PathResolutionError(ClusterSpecError):
    """Raised when a ``file`` specifier cannot be turned into an absolute path.

    This typically means the current working directory has been removed
    or is not readable.
    """

    pass


class SchemaReadError(ClusterSpecError):
    """Raised when a schema file cannot be read.

    This can occur when:
    - The file does not exist
    - The user doesn't have permission to read it
    - The path points to a directory
    """

    pass


class SchemaParseError(ClusterSpecError):
    """Raised when a schema document is not JSON of the expected shape."""

    pass


class SpecNotImplementedError(ClusterSpecError):
    """Raised by operations that are not available for a specifier kind.

    Reading the OpenAPI document from a live API server is not supported.
    """

    pass


class MissingClientError(ClusterSpecError):
    """Raised when a remote schema is requested without an HTTP session."""

    pass


class TransportError(ClusterSpecError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused).

    A non-200 response is not a transport error; it only means the schema
    is absent at the requested ref.
    """

    pass


class UnrecognizedVersionError(ClusterSpecError):
    """Raised when a version cannot be mapped to a ``release-<major>.<minor>`` branch."""

    pass


class SchemaUnavailableError(ClusterSpecError):
    """Raised when neither the version tag nor its release branch has a schema."""

    pass


class InvalidTemplateError(ClusterSpecError):
    """Raised when a schema URL template uses placeholders other than ``{ref}``."""

    pass


class OutputWriteError(ClusterSpecError):
    """Raised when a downloaded schema cannot be written to the output file.

    This can occur when:
    - The target directory does not exist
    - The user doesn't have permission to write there
    """

    pass
