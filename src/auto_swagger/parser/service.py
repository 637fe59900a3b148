"""Service file loader.

Reads a serverless-style YAML service file, and the partial documents it
references, into Python structures.
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from auto_swagger.errors import ConfigurationError
from .base import ServiceConfig

log = logging.getLogger(__name__)


class _ServiceLoader(yaml.SafeLoader):
    """SafeLoader that keeps CloudFormation short-form tags as plain values."""


def _construct_tagged(loader: yaml.SafeLoader, tag_suffix: str, node: yaml.Node):
    if isinstance(node, yaml.ScalarNode):
        return loader.construct_scalar(node)
    if isinstance(node, yaml.SequenceNode):
        return loader.construct_sequence(node, deep=True)
    return loader.construct_mapping(node, deep=True)


_ServiceLoader.add_multi_constructor("!", _construct_tagged)


def load_document(file_path: Path) -> dict:
    """Read a JSON or YAML file whose top level must be a mapping."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read {file_path}: {e.strerror or e}") from e

    try:
        data = yaml.load(text, Loader=_ServiceLoader)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Cannot parse {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"{file_path} must contain a mapping at the top level")
    log.debug("Loaded %s (%d top-level keys)", file_path, len(data))
    return data


def load_service(file_path: Path) -> ServiceConfig:
    """Load and validate a service file."""
    data = load_document(file_path)
    try:
        return ServiceConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid service file {file_path}:\n{e}") from e
