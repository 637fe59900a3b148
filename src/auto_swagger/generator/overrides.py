"""Top-level overrides and partial-document merging.

Settings are copied onto the base document first; override files are then
merged in the order given. In ``KEYED_SECTIONS`` incoming keys replace
same-named keys and leave the others alone. Every other top-level field
is taken from the incoming file as a whole. Sections the adapters append
to (``paths`` entries, ``item``) are type-checked here so a malformed file
fails as a configuration error.
"""

import copy
import logging
from collections.abc import Iterable
from pathlib import Path

from auto_swagger.errors import ConfigurationError
from auto_swagger.parser.base import AutoSwaggerSettings
from auto_swagger.parser.service import load_document
from .base import OutputAdapter

log = logging.getLogger(__name__)

KEYED_SECTIONS = ("paths", "definitions", "securityDefinitions")
LIST_SECTIONS = ("item",)


def _set_in(document: dict, key_path: tuple[str, ...], value) -> None:
    target = document
    for key in key_path[:-1]:
        target = target.setdefault(key, {})
    target[key_path[-1]] = value


def apply_overrides(document: dict, settings: AutoSwaggerSettings, adapter: OutputAdapter) -> dict:
    """Copy the settings that are present onto a copy of ``document``."""
    document = copy.deepcopy(document)
    for field_name, key_path in adapter.override_fields.items():
        value = getattr(settings, field_name)
        if not value:
            continue
        _set_in(document, key_path, copy.deepcopy(value))
    return adapter.apply_settings(document, settings)


def merge_document(document: dict, incoming: dict, source: str = "<document>") -> dict:
    merged = dict(document)
    for key, value in incoming.items():
        if key in LIST_SECTIONS and value is not None and not isinstance(value, list):
            raise ConfigurationError(f"{source}: '{key}' must be a list")
        if key not in KEYED_SECTIONS:
            merged[key] = copy.deepcopy(value)
            continue
        if value is None:
            continue
        if not isinstance(value, dict):
            raise ConfigurationError(f"{source}: '{key}' must be a mapping")
        if key == "paths":
            for path, operations in value.items():
                if not isinstance(operations, dict):
                    raise ConfigurationError(f"{source}: path '{path}' must map methods to operations")
        section = dict(merged.get(key) or {})
        section.update(copy.deepcopy(value))
        merged[key] = section
    return merged


def merge_document_files(
    document: dict, files: Iterable[str | Path], base_dir: Path | None = None
) -> dict:
    """Merge override files into ``document``; later files win."""
    for file in files:
        path = Path(file)
        if base_dir is not None and not path.is_absolute():
            path = base_dir / path
        log.debug("Merging override file %s", path)
        document = merge_document(document, load_document(path), source=str(path))
    return document
