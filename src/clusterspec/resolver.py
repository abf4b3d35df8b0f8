"""Resolution of cluster specifiers into ClusterSpec objects.

Example:
    >>> spec = parse_cluster_spec("version:v1.11.7", session=requests.Session())
    >>> spec.resource()
    'v1.11.7'

"""

import os

import requests
from icecream import ic

from clusterspec.exceptions import PathResolutionError
from clusterspec.filesystem import FileSystem, OsFileSystem
from clusterspec.models import SpecKind, parse_specifier
from clusterspec.remote import DEFAULT_TIMEOUT, SCHEMA_URL_TEMPLATE, VersionSpec
from clusterspec.spec import ClusterSpec, FileSpec, LiveSpec


def parse_cluster_spec(
    specifier: str,
    fs: FileSystem | None = None,
    session: requests.Session | None = None,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    url_template: str = SCHEMA_URL_TEMPLATE,
) -> ClusterSpec:
    """Parse a cluster specifier into a ClusterSpec.

    For example, 'version:v1.7.1' yields the cluster specification
    associated with the v1.7.1 build of Kubernetes. Nothing is read or
    downloaded here.

    Args:
        specifier: One of 'version:<tag>', 'file:<path>' or 'url:<server>'.
        fs: Filesystem for 'file' specifiers (defaults to the local disk).
        session: HTTP session for 'version' specifiers.
        timeout: Request timeout in seconds for 'version' specifiers.
        url_template: Schema URL template for 'version' specifiers.

    Returns:
        The ClusterSpec matching the specifier kind.

    Raises:
        InvalidSpecifierError: If the specifier is not '<kind>:<value>'.
        UnknownKindError: If the kind is not supported.
        PathResolutionError: If a file path cannot be made absolute.

    """
    parsed = parse_specifier(specifier)
    ic(parsed)

    match parsed.kind:
        case SpecKind.VERSION:
            return VersionSpec(
                k8s_version=parsed.value,
                session=session,
                timeout=timeout,
                url_template=url_template,
            )
        case SpecKind.FILE:
            try:
                path = os.path.abspath(parsed.value)
            except OSError as err:
                raise PathResolutionError(f"Failed to resolve path '{parsed.value}': {err}") from err
            return FileSpec(path=path, fs=fs if fs is not None else OsFileSystem())
        case SpecKind.URL:
            return LiveSpec(server_url=parsed.value)
