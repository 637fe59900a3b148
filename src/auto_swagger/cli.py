"""CLI entry point for auto-swagger."""

import json
import logging
from pathlib import Path

import click

from auto_swagger.errors import ConfigurationError
from auto_swagger.generator.base import OutputAdapter
from auto_swagger.generator.pipeline import generate
from auto_swagger.generator.postman import PostmanAdapter
from auto_swagger.generator.swagger import SwaggerAdapter
from auto_swagger.parser.service import load_service


def _generate_doc(config_path: Path, adapter: OutputAdapter) -> dict:
    try:
        config = load_service(config_path)
        return generate(config, adapter, base_dir=config_path.parent)
    except ConfigurationError as e:
        raise click.ClickException(str(e)) from e


def _write_doc(document: dict, output: Path | None, indent: int | None, label: str) -> None:
    text = json.dumps(document, indent=indent, ensure_ascii=False)
    if output is None:
        click.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text + "\n", encoding="utf-8")
    click.echo(f"{label} saved to {output}", err=True)


config_argument = click.argument(
    "config_path", default="serverless.yml", type=click.Path(dir_okay=False, path_type=Path)
)
output_option = click.option(
    "-o", "--output", default=None, type=click.Path(dir_okay=False, path_type=Path),
    help="Write the document to this file instead of stdout.",
)
indent_option = click.option("--indent", default=None, type=int, help="Indent the JSON output.")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr.")
def main(verbose: bool):
    """auto-swagger: document the HTTP routes of a service as Swagger or Postman."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@config_argument
@output_option
@indent_option
def generate_swagger(config_path: Path, output: Path | None, indent: int | None):
    """Generate a Swagger 2.0 document for your API."""
    document = _generate_doc(config_path, SwaggerAdapter())
    _write_doc(document, output, indent, "Swagger document")


@main.command()
@config_argument
@output_option
@indent_option
def generate_postman(config_path: Path, output: Path | None, indent: int | None):
    """Generate a Postman collection for your API."""
    document = _generate_doc(config_path, PostmanAdapter())
    _write_doc(document, output, indent, "Postman collection")
