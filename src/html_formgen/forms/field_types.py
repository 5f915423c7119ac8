"""
Type helpers for the form renderer.

Maps declared field types to HTML input types and classifies the types the
renderer has to treat specially (Optional references and sequences).
"""

import collections.abc
import types
from typing import Any, Type, Union, get_args, get_origin

from html_formgen.forms.exceptions import UnsupportedFieldKindError
from html_formgen.forms.form_constants import CONSTANTS

_UNION_ORIGINS = (Union, types.UnionType)

_SEQUENCE_BASES = (
    list, tuple, set, frozenset, bytes, bytearray,
    collections.abc.Sequence, collections.abc.Set,
)


def is_optional(param_type: Type) -> bool:
    """Check if type is Optional[T] (``Union[T, None]`` or ``T | None``)."""
    if get_origin(param_type) in _UNION_ORIGINS:
        args = get_args(param_type)
        return len(args) == 2 and type(None) in args
    return False


def resolve_optional(param_type: Type) -> Type:
    """Resolve Optional[T] to T."""
    if is_optional(param_type):
        return next(arg for arg in get_args(param_type) if arg is not type(None))
    return param_type


def is_sequence_type(param_type: Type) -> bool:
    """
    Check if type is a list-like container, including Optional[...] of one.

    Strings are not sequences here; they render as text inputs.
    """
    param_type = resolve_optional(param_type)
    origin = get_origin(param_type) or param_type
    if not isinstance(origin, type) or issubclass(origin, str):
        return False
    return issubclass(origin, _SEQUENCE_BASES)


def html_input_type(param_type: Type) -> str:
    """
    Infer the HTML input type for a declared field type.

    Example:
        >>> html_input_type(bool)
        'checkbox'
        >>> html_input_type(Optional[int])
        'number'

    Raises:
        UnsupportedFieldKindError: If the type has no corresponding input type.
    """
    if is_optional(param_type):
        return html_input_type(resolve_optional(param_type))

    if isinstance(param_type, type):
        # bool is an int subclass, check it first
        if issubclass(param_type, bool):
            return CONSTANTS.INPUT_TYPE_CHECKBOX
        if issubclass(param_type, int):
            return CONSTANTS.INPUT_TYPE_NUMBER
        if issubclass(param_type, str):
            return CONSTANTS.INPUT_TYPE_TEXT

    raise UnsupportedFieldKindError(CONSTANTS.NO_INPUT_TYPE_MSG.format(param_type))


def is_zero_value(value: Any) -> bool:
    """Check if a field value is the zero value of its kind (None, False, 0, "")."""
    if value is None:
        return True
    if isinstance(value, (bool, int, float, str, bytes)):
        return not value
    return False


def format_value(value: Any) -> str:
    """Render a field value as attribute text; booleans become ``true``/``false``."""
    if isinstance(value, bool):
        return CONSTANTS.TRUE_LITERAL if value else CONSTANTS.FALSE_LITERAL
    return str(value)
