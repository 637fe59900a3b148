"""Path parameter resolution.

Parameter names come from two places: ``{name}`` placeholders in the path
template and explicit per-parameter metadata. Explicit entries win and
are emitted first; any template name left undescribed follows as a
required string parameter.
"""

import logging
import re
from collections.abc import Mapping

from auto_swagger.parser.base import PathParameterSpec
from .base import ParameterEntry

log = logging.getLogger(__name__)

TEMPLATE_PARAM_RE = re.compile(r"\{([^{}]+)\}")


def extract_template_names(path: str) -> list[str]:
    """Return placeholder names in left-to-right order, first occurrence only."""
    names: list[str] = []
    for name in TEMPLATE_PARAM_RE.findall(path or ""):
        if name not in names:
            names.append(name)
    return names


def resolve_path_parameters(
    path: str, explicit: Mapping[str, PathParameterSpec] | None = None
) -> list[ParameterEntry]:
    remaining = extract_template_names(path)
    entries: list[ParameterEntry] = []

    for name, spec in (explicit or {}).items():
        entries.append(
            ParameterEntry(
                location="path",
                name=name,
                required=spec.required,
                param_type="string",
                description=spec.description,
            )
        )
        if name in remaining:
            remaining.remove(name)
        else:
            # Kept anyway: documentation-only parameters are allowed.
            log.debug("Path parameter %r is not in template %s", name, path)

    for name in remaining:
        entries.append(ParameterEntry(location="path", name=name, required=True, param_type="string"))

    return entries
