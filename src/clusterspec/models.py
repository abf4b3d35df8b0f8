"""Data models for clusterspec.

This module provides the specifier kinds and the parsed specifier value
object shared by the resolver and the command-line interface.
"""

from dataclasses import dataclass
from enum import Enum

from clusterspec.exceptions import InvalidSpecifierError, UnknownKindError

# Separator between the kind and the value of a specifier
_SEPARATOR = ":"


class SpecKind(str, Enum):
    """Supported cluster specifier kinds.

    Inherits from str so members compare equal to the raw tokens used
    on the command line (e.g. ``"version"``).
    """

    VERSION = "version"
    FILE = "file"
    URL = "url"


@dataclass(frozen=True, slots=True)
class Specifier:
    """A syntactically valid ``<kind>:<value>`` specifier.

    Attributes:
        kind: Which source the specifier selects.
        value: The raw value after the first ``:`` (never empty).

    """

    kind: SpecKind
    value: str

    def __str__(self) -> str:
        """Return the specifier in its command-line form."""
        return f"{self.kind.value}{_SEPARATOR}{self.value}"


def parse_specifier(text: str) -> Specifier:
    """Split a specifier string into its kind and value.

    Only the first ``:`` separates the two parts, so values such as
    ``https://host:6443`` are kept intact.

    Args:
        text: The raw specifier, e.g. ``"version:v1.11.7"``.

    Returns:
        The parsed Specifier.

    Raises:
        InvalidSpecifierError: If there is no ``:`` or the value is empty.
        UnknownKindError: If the kind is not one of the supported tokens.

    """
    kind, separator, value = text.partition(_SEPARATOR)
    if not separator or not value:
        raise InvalidSpecifierError(f"Invalid API specification '{text}'")

    try:
        spec_kind = SpecKind(kind)
    except ValueError as err:
        raise UnknownKindError(
            f"Could not parse cluster spec '{text}': unknown kind '{kind}' "
            f"(expected one of: {', '.join(k.value for k in SpecKind)})"
        ) from err

    return Specifier(kind=spec_kind, value=value)
