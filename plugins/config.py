"""
Policy Configuration
Unmarked Metacard Rejection Plugin

Loads marking policy settings from YAML. Values may reference environment
variables as ${VAR} or ${VAR:default}.

Example config/rejectunmarked.yaml:

    rejectunmarked:
      classification-system-required: ${REQUIRE_CLASSIFICATION_SYSTEM:false}
      codewords-required: true
"""

import logging
import os
import re
from pathlib import Path

import yaml

from plugins.rejection import MarkingPolicy

logger = logging.getLogger(__name__)

ENV_REFERENCE = re.compile(r'\$\{(?P<var>[^}:]+)(?::(?P<default>[^}]*))?\}')


def expand_env(text: str) -> str:
    """Replace ${VAR} / ${VAR:default} references; unset without default is empty."""
    return ENV_REFERENCE.sub(
        lambda m: os.environ.get(m.group("var"), m.group("default") or ""),
        text,
    )


def find_policy_file(config_path: str | Path, name: str) -> Path | None:
    """Return <config_path>/<name>.yaml, falling back to .yml."""
    for suffix in (".yaml", ".yml"):
        candidate = Path(config_path) / f"{name}{suffix}"
        if candidate.exists():
            return candidate
    return None


def read_policy_section(config_path: str | Path, name: str) -> dict:
    """
    Read the policy mapping stored under the top-level `name` key.

    Returns an empty mapping when the file or section is absent.

    Raises:
        ValueError: if the section is not a mapping
    """
    path = find_policy_file(config_path, name)
    if path is None:
        logger.debug(f"No marking policy file '{name}' in {config_path}")
        return {}

    document = yaml.safe_load(expand_env(path.read_text(encoding="utf-8"))) or {}
    section = document.get(name) if isinstance(document, dict) else None
    if section is None:
        return {}

    if not isinstance(section, dict):
        raise ValueError(
            f"Expected a mapping under '{name}' in {path}, got {type(section).__name__}"
        )
    return section


def load_policy(config_path: str | Path = "config", name: str = "rejectunmarked") -> MarkingPolicy:
    """
    Load a MarkingPolicy from <config_path>/<name>.yaml.

    Keys may be hyphenated operator names or field names. Unknown keys are
    logged and skipped; blank values keep the field default.
    """
    settings = {}
    for key, value in read_policy_section(config_path, name).items():
        field = MarkingPolicy.field_for(key)
        if field is None:
            logger.warning(f"Ignoring unknown marking policy key: {key}")
            continue
        if value is None or value == "":
            continue
        settings[field] = value

    policy = MarkingPolicy.model_validate(settings)
    logger.info(f"Loaded marking policy '{name}': {policy.model_dump(by_alias=True)}")
    return policy
