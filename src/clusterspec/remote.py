"""OpenAPI schemas published for Kubernetes releases.

This module provides VersionSpec, which downloads the OpenAPI document
that the Kubernetes repository publishes for a given tag. When the tag has
no document, the release branch of the same minor version is tried once.
"""

import re
from dataclasses import dataclass, field

import requests
from icecream import ic

from clusterspec import console
from clusterspec.exceptions import (
    InvalidTemplateError,
    MissingClientError,
    SchemaUnavailableError,
    TransportError,
    UnrecognizedVersionError,
)
from clusterspec.spec import ClusterSpec

SCHEMA_URL_TEMPLATE = "https://raw.githubusercontent.com/kubernetes/kubernetes/{ref}/api/openapi-spec/swagger.json"

DEFAULT_TIMEOUT = 60.0

_NUMERIC_SEGMENT = re.compile(r"[0-9]+")


def release_ref(version: str) -> str:
    """Map a version tag to its release branch name.

    A single leading 'v' is removed and the remainder split on '.'; the
    first two segments become the branch, e.g. 'v1.11.7' -> 'release-1.11'.

    Args:
        version: The version tag (e.g. 'v1.11.7' or '1.11').

    Returns:
        The release branch name.

    Raises:
        UnrecognizedVersionError: If fewer than two numeric segments are present.

    """
    normalized = version[1:] if version.startswith("v") else version
    segments = normalized.split(".")
    if len(segments) < 2 or not all(_NUMERIC_SEGMENT.fullmatch(s) for s in segments[:2]):
        raise UnrecognizedVersionError(f"unrecognizable k8s version '{version}'")

    return f"release-{segments[0]}.{segments[1]}"


def schema_url(ref: str, template: str = SCHEMA_URL_TEMPLATE) -> str:
    """Return the URL of the OpenAPI document published at ``ref``.

    Raises:
        InvalidTemplateError: If the template has placeholders other than '{ref}'.

    """
    try:
        return template.format(ref=ref)
    except (KeyError, IndexError, AttributeError, ValueError) as err:
        raise InvalidTemplateError(
            f"Invalid schema URL template '{template}': only the {{ref}} placeholder is supported ({err!r})"
        ) from err


@dataclass(frozen=True, slots=True)
class VersionSpec(ClusterSpec):
    """OpenAPI schema released with a specific version of Kubernetes.

    Attributes:
        k8s_version: The version tag, kept verbatim (e.g. 'v1.11.7').
        session: HTTP session used for downloads.
        timeout: Per-request timeout in seconds.
        url_template: Schema URL with a '{ref}' placeholder.

    """

    k8s_version: str
    session: requests.Session | None = field(default=None, repr=False)
    timeout: float = DEFAULT_TIMEOUT
    url_template: str = SCHEMA_URL_TEMPLATE

    def resource(self) -> str:
        return self.k8s_version

    def version(self) -> str:
        return self.k8s_version

    def _attempt_to_get_schema(self, ref: str) -> bytes | None:
        """Download the schema published at ``ref``.

        Args:
            ref: Tag or branch name to download from.

        Returns:
            The schema bytes, or None if the server did not answer with 200.

        Raises:
            TransportError: If the request fails at the network level.

        """
        url = schema_url(ref, self.url_template)
        ic(url)

        try:
            with self.session.get(url, timeout=self.timeout) as response:
                if response.status_code != 200:
                    console.warning(
                        f"received status code '{response.status_code}' when attempting to retrieve "
                        f"OpenAPI schema for cluster version '{ref}' from URL '{url}'"
                    )
                    return None
                return response.content
        except requests.RequestException as err:
            raise TransportError(f"Failed to fetch OpenAPI schema from {url}: {err}") from err

    def openapi(self) -> bytes:
        """Download the OpenAPI schema for this version.

        The version tag is tried first; if it has no schema, the matching
        release branch is tried once.

        Raises:
            MissingClientError: If no HTTP session was provided.
            InvalidTemplateError: If the URL template is malformed.
            TransportError: If a request fails at the network level.
            UnrecognizedVersionError: If the tag has no schema and cannot be
                mapped to a release branch.
            SchemaUnavailableError: If neither ref has a schema.

        """
        if self.session is None:
            raise MissingClientError("An HTTP session is required to fetch remote OpenAPI schemas")

        schema = self._attempt_to_get_schema(self.k8s_version)
        if schema is not None:
            return schema

        # e.g. for v1.11.7 the release branch is release-1.11
        fallback = release_ref(self.k8s_version)
        console.info(f"Retrying with release branch {console.highlight(fallback)}")
        schema = self._attempt_to_get_schema(fallback)
        if schema is None:
            raise SchemaUnavailableError(
                f"unable to fetch OpenAPI schema for version '{self.k8s_version}' "
                f"(tried '{self.k8s_version}' and '{fallback}')"
            )

        return schema
