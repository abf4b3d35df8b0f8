#!/usr/bin/env python
"""Command-line interface for clusterspec.

This module provides the main CLI entry point, which resolves a cluster
specifier and prints or saves the matching OpenAPI schema.
"""

import sys
from pathlib import Path

import click
import requests
from icecream import ic

from clusterspec import __version__, console
from clusterspec.exceptions import ClusterSpecError, OutputWriteError
from clusterspec.models import parse_specifier
from clusterspec.remote import DEFAULT_TIMEOUT, SCHEMA_URL_TEMPLATE
from clusterspec.resolver import parse_cluster_spec
from clusterspec.spec import ClusterSpec


def show_info(specifier: str, spec: ClusterSpec) -> None:
    """Print a summary of the resolved cluster spec.

    Args:
        specifier: The specifier as given on the command line.
        spec: The ClusterSpec resolved from it.

    Raises:
        ClusterSpecError: If the version cannot be determined.

    """
    console.summary_panel(
        "Cluster spec",
        {
            "Kind": parse_specifier(specifier).kind.value,
            "Resource": spec.resource(),
            "Version": spec.version(),
        },
    )


def write_schema(spec: ClusterSpec, output: str | None) -> None:
    """Fetch the schema and write it to ``output`` or stdout.

    Args:
        spec: The ClusterSpec to fetch the schema for.
        output: Destination file, or None for stdout.

    Raises:
        ClusterSpecError: If the schema cannot be retrieved or written.

    """
    console.action(f"Retrieving OpenAPI schema for {console.highlight(spec.resource())}")
    with console.spinner("Fetching OpenAPI schema..."):
        schema = spec.openapi()
    ic(len(schema))

    if output is None:
        stdout = click.get_binary_stream("stdout")
        stdout.write(schema)
        stdout.flush()
        return

    try:
        Path(output).write_bytes(schema)
    except OSError as err:
        raise OutputWriteError(f"Failed to write OpenAPI schema to '{output}': {err}") from err
    console.success(f"Saved OpenAPI schema to {console.highlight(output)}")


@click.command(help="Resolve a cluster specifier to its OpenAPI schema")
@click.argument("specifier", required=False)
@click.option("--version", "-v", required=False, is_flag=True, help="print version")
@click.option("--debug", required=False, is_flag=True, help="print debug information")
@click.option("--output", "-o", required=False, help="file to write the schema to (default: stdout)")
@click.option("--info", "show_summary", required=False, is_flag=True, help="print resource and version only")
@click.option(
    "--timeout",
    type=float,
    default=DEFAULT_TIMEOUT,
    show_default=True,
    envvar="CLUSTERSPEC_TIMEOUT",
    help="HTTP timeout in seconds",
)
@click.option(
    "--url-template",
    default=SCHEMA_URL_TEMPLATE,
    envvar="CLUSTERSPEC_URL_TEMPLATE",
    help="schema URL with a {ref} placeholder",
)
def cli(
    specifier: str | None,
    version: bool,
    debug: bool,
    output: str | None,
    show_summary: bool,
    timeout: float,
    url_template: str,
) -> None:
    """Process CLI arguments and execute the appropriate action.

    Args:
        specifier: Cluster specifier ('version:<tag>', 'file:<path>' or 'url:<server>').
        version: Print version and exit.
        debug: Enable debug output.
        output: File to write the schema to.
        show_summary: Print a summary instead of the schema.
        timeout: HTTP timeout in seconds.
        url_template: Schema URL template for version specifiers.

    """
    if not debug:
        ic.disable()
    else:
        ic.enable()

    if version:
        click.echo(__version__)
        return

    if specifier is None:
        raise click.UsageError("Missing argument 'SPECIFIER'.")

    try:
        with requests.Session() as session:
            spec = parse_cluster_spec(specifier, session=session, timeout=timeout, url_template=url_template)
            ic(spec)

            if show_summary:
                show_info(specifier, spec)
                return

            write_schema(spec, output)
    except ClusterSpecError as e:
        console.error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    cli()
