"""CLI entry point for swagger-doc."""

import logging
import sys
from pathlib import Path

import click

from swagger_doc import __version__
from swagger_doc.errors import SwaggerDocError
from swagger_doc.generate import GenerateOptions, generate


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )


@click.command()
@click.argument("spec_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-o", "--output", "output_dir", default="docs", type=click.Path(file_okay=False, path_type=Path), help="The destination directory to write the documentation files to.")
@click.option("-a", "--api", "api_dir", default="api", help="The intermediate directory within the output directory to write the files to.")
@click.option("-n", "--name", "base_name", default="swagger", help="The base name to use for the definition files.")
@click.option("-t", "--title", default="", help="The title for the HTML page. Defaults to the base name.")
@click.option("-u", "--url", "server_url", default="", help="An additional server URL.")
@click.option("-e", "--embedded", is_flag=True, help="Embed the spec directly in the HTML page.")
@click.option("-g", "--tags", default="", metavar="TAG1,TAG2", help="Comma-separated tags to filter the APIs. Prefix with '!' to exclude APIs with that tag.")
@click.option("-f", "--first-tag-only", is_flag=True, help="Keep only the first tag of each API.")
@click.option("--html/--no-html", "generate_html", default=True, help="Generate the HTML viewer page.")
@click.option("-b", "--badges", default="", metavar="TAG:COLOR,...", help="Comma-separated tag:color pairs to generate badges.")
@click.option("--format", "output_format", default="json", type=click.Choice(["json", "yaml"]), help="Format of the written spec file.")
@click.option("-v", "--verbose", is_flag=True, help="Log every processed operation.")
@click.version_option(__version__, prog_name="Swagger Doc")
def main(
    spec_path: Path,
    output_dir: Path,
    api_dir: str,
    base_name: str,
    title: str,
    server_url: str,
    embedded: bool,
    tags: str,
    first_tag_only: bool,
    generate_html: bool,
    badges: str,
    output_format: str,
    verbose: bool,
):
    """Post-process an API specification and write it with a RapiDoc viewer."""
    _configure_logging(verbose)

    options = GenerateOptions(
        spec_path=spec_path,
        output_dir=output_dir,
        api_dir=api_dir,
        base_name=base_name,
        title=title,
        server_url=server_url,
        tags=tags,
        badges=badges,
        first_tag_only=first_tag_only,
        embedded=embedded,
        generate_html=generate_html,
        output_format=output_format,
    )

    click.echo(f"Processing {spec_path}...")
    try:
        result = generate(options)
    except SwaggerDocError as e:
        click.echo(str(e))
        sys.exit(1)

    click.echo(f"Spec saved to {result.spec_file} ({result.operations} operations)")
    if result.viewer_file is not None:
        click.echo(f"Viewer saved to {result.viewer_file}")
