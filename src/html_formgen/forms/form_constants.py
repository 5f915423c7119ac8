"""
Form rendering constants for eliminating magic strings throughout the renderer.

This module centralizes the tag keys, option names, input types and error
message templates used by the tag parser, the type inference helpers and the
form renderer.
"""

from dataclasses import dataclass
from typing import FrozenSet


@dataclass(frozen=True)
class FormRenderConstants:
    """
    Centralized constants for HTML form rendering.

    Categories:
    - Annotation (tag) syntax
    - Option keys accepted in tags and override mappings
    - Inferred input types
    - Error message templates
    """

    # Annotation syntax
    DEFAULT_TAG_NAME: str = "form"
    TAG_SEPARATOR: str = ","
    OPTION_SEPARATOR: str = "="
    SKIP_FIELD_NAME: str = "-"

    # Option keys
    OPTION_TYPE: str = "type"
    OPTION_CLASS: str = "class"
    OPTION_ID: str = "id"
    OPTION_VALUE: str = "value"
    OVERRIDE_OPTION_KEYS: FrozenSet[str] = frozenset({
        "type", "class", "css_class", "id", "name", "value"
    })

    # Inferred input types
    INPUT_TYPE_CHECKBOX: str = "checkbox"
    INPUT_TYPE_NUMBER: str = "number"
    INPUT_TYPE_TEXT: str = "text"

    # Emitted markup
    TRUE_LITERAL: str = "true"
    FALSE_LITERAL: str = "false"
    DEFAULT_FRAGMENT_SEPARATOR: str = "\n"

    # Error messages
    NOT_A_RECORD_MSG: str = "render: value must be a dataclass instance, got {}"
    NO_INPUT_TYPE_MSG: str = "html_input_type: no corresponding input type for {}"
    NESTED_RECORD_MISSING_MSG: str = "html_input_type: field '{}' of type {} holds no record to render"
    SLICE_FIELD_MSG: str = "render: cannot render list types (field '{}' of type {})"
    INVALID_OPTION_FORMAT_MSG: str = "invalid option format: {!r}"
    INVALID_OPTION_KEY_MSG: str = "invalid option: {!r}"
    INVALID_OPTION_VALUE_MSG: str = "option {!r} must be a string, got {!r}"
    DUPLICATE_CLASS_KEY_MSG: str = "options may set 'class' or 'css_class', not both"
    INVALID_ANNOTATION_MSG: str = "annotation for field '{}' must be a string or RenderOptions, got {}"
    FIELD_ERROR_MSG: str = "field '{}': {}"


# Create a singleton instance for easy access throughout the codebase
CONSTANTS = FormRenderConstants()
