"""One complete generation run."""

from pathlib import Path

from auto_swagger.parser.base import ServiceConfig
from .base import OutputAdapter
from .collector import collect
from .overrides import apply_overrides, merge_document_files


def generate(config: ServiceConfig, adapter: OutputAdapter, base_dir: Path | None = None) -> dict:
    """Build the full document for ``config``.

    Override files are resolved relative to ``base_dir`` and all of them are
    read before any route is added.
    """
    settings = config.settings
    document = apply_overrides(adapter.new_document(), settings, adapter)
    document = merge_document_files(document, settings.swagger_files, base_dir)
    return collect(config.functions, settings, adapter, document)
