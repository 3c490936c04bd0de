"""
Constraint file discovery and loading.

Looks for ``.formspec.yml``, ``.formspec.yaml`` or ``formspec.yml`` in
the working directory and, optionally, its parents.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import ValidationError

from formspec.config import get_config
from formspec.constraints.models import ConstraintConfig, FormSpecFileConfig
from formspec.errors import ConstraintConfigError


logger = logging.getLogger("formspec")

CONFIG_FILE_NAMES = (".formspec.yml", ".formspec.yaml", "formspec.yml")


@dataclass
class LoadedConstraints:
    """Result of loading a constraints file."""

    config: ConstraintConfig
    config_path: Path | None = None
    found: bool = False


def find_config_file(start_dir: str | Path, search_parents: bool = True) -> Path | None:
    """Return the first constraints file found, walking up when allowed."""
    current = Path(start_dir).resolve()
    while True:
        for file_name in CONFIG_FILE_NAMES:
            candidate = current / file_name
            if candidate.is_file():
                return candidate
        if not search_parents or current.parent == current:
            return None
        current = current.parent


def parse_constraints(text: str, source: str = "<string>") -> ConstraintConfig:
    """
    Parse YAML text into a ConstraintConfig.

    Raises:
        ConstraintConfigError: If the YAML is malformed or does not
            match the expected structure.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConstraintConfigError(f"Invalid YAML in {source}: {e}") from e

    if data is None:
        return ConstraintConfig()
    if not isinstance(data, dict):
        raise ConstraintConfigError(f"{source}: top level must be a mapping")

    try:
        return FormSpecFileConfig.model_validate(data).constraints
    except ValidationError as e:
        raise ConstraintConfigError(f"Invalid constraints in {source}: {e}") from e


def load_constraints(
    config_path: str | Path | None = None,
    cwd: str | Path | None = None,
    search_parents: bool | None = None,
) -> LoadedConstraints:
    """
    Load project constraints.

    Args:
        config_path: Explicit file to load. Defaults to the configured
            ``constraints_file``, then to a search from ``cwd``.
        cwd: Directory to start searching from (default: current dir).
        search_parents: Whether to continue into parent directories.

    Returns:
        LoadedConstraints; defaults (everything allowed) when no file
        is found.

    Raises:
        ConstraintConfigError: If an explicit file is missing or the
            file found cannot be parsed.
    """
    settings = get_config()
    if config_path is None and settings.constraints_file:
        config_path = settings.constraints_file
    if search_parents is None:
        search_parents = settings.search_parent_dirs

    if config_path is not None:
        path = Path(config_path)
        if not path.is_file():
            raise ConstraintConfigError(f"Constraints file not found: {path}")
    else:
        path = find_config_file(cwd or Path.cwd(), search_parents)
        if path is None:
            logger.debug("No constraints file found, all features allowed")
            return LoadedConstraints(config=ConstraintConfig())

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConstraintConfigError(f"Cannot read constraints file {path}: {e}") from e

    logger.info(f"Loaded constraints from {path}")
    return LoadedConstraints(
        config=parse_constraints(text, source=str(path)),
        config_path=path,
        found=True,
    )
