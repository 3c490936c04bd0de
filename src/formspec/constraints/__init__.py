"""
Project constraints for FormSpec.

Restrict which field types, layout features and field options forms in
a project may use, configured through a ``.formspec.yml`` file:

    constraints:
      fieldTypes:
        dynamicEnum: error
      layout:
        group: warn
        maxNestingDepth: 1
      fieldOptions:
        placeholder: warn
"""

from formspec.constraints.loader import (
    CONFIG_FILE_NAMES,
    LoadedConstraints,
    find_config_file,
    load_constraints,
    parse_constraints,
)
from formspec.constraints.models import (
    ConstraintConfig,
    ConstraintSeverity,
    FieldOptionConstraints,
    FieldTypeConstraints,
    FormSpecFileConfig,
    LayoutConstraints,
)
from formspec.constraints.validators import (
    extract_field_options,
    validate_constraints,
)

__all__ = [
    # Configuration
    "ConstraintConfig",
    "ConstraintSeverity",
    "FieldOptionConstraints",
    "FieldTypeConstraints",
    "FormSpecFileConfig",
    "LayoutConstraints",
    # Loading
    "CONFIG_FILE_NAMES",
    "LoadedConstraints",
    "find_config_file",
    "load_constraints",
    "parse_constraints",
    # Validation
    "extract_field_options",
    "validate_constraints",
]
