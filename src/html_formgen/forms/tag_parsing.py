"""
Field annotation parsing.

A field annotation lives in the dataclass field's metadata under the tag
name (``"form"`` by default) and is either a ``RenderOptions`` instance or a
tag string::

    username: str = field(default="", metadata={"form": "username,type=text"})
    password: str = field(default="", metadata={"form": ",type=password"})
    hidden: str = field(default="", metadata={"form": "-"})

The first segment of a tag string is the form name; when it is empty the
attribute name is used. A first segment containing ``=`` is an option, not
a name.
"""

import dataclasses
import logging
from typing import List, Tuple

from html_formgen.forms.exceptions import InvalidOptionSyntaxError, UnknownOptionKeyError
from html_formgen.forms.form_constants import CONSTANTS
from html_formgen.forms.render_options import RenderOptions

logger = logging.getLogger(__name__)


def parse_tag(tag: str) -> Tuple[str, List[str]]:
    """
    Split a tag string into its alias and its ``key=value`` option strings.

    Example:
        >>> parse_tag("username,type=text,class=wide")
        ('username', ['type=text', 'class=wide'])
        >>> parse_tag("type=password")
        ('', ['type=password'])
    """
    alias, *options = tag.split(CONSTANTS.TAG_SEPARATOR)
    if CONSTANTS.OPTION_SEPARATOR in alias:
        options.append(alias)
        alias = ""
    return alias, options


def parse_options(options: List[str]) -> RenderOptions:
    """
    Parse ``key=value`` option strings into ``RenderOptions``.

    Raises:
        InvalidOptionSyntaxError: If an option is not exactly one ``key=value`` pair.
        UnknownOptionKeyError: If the key is not one of type, class, id, value.
    """
    parsed = RenderOptions()
    for option in options:
        parts = option.split(CONSTANTS.OPTION_SEPARATOR)
        if len(parts) != 2:
            raise InvalidOptionSyntaxError(CONSTANTS.INVALID_OPTION_FORMAT_MSG.format(option))

        key, value = parts
        if key == CONSTANTS.OPTION_TYPE:
            parsed.type = value
        elif key == CONSTANTS.OPTION_CLASS:
            parsed.css_class = value
        elif key == CONSTANTS.OPTION_ID:
            parsed.id = value
        elif key == CONSTANTS.OPTION_VALUE:
            parsed.value = value
        else:
            raise UnknownOptionKeyError(CONSTANTS.INVALID_OPTION_KEY_MSG.format(key))
    return parsed


def options_from_field(field: dataclasses.Field, tag_name: str = CONSTANTS.DEFAULT_TAG_NAME) -> RenderOptions:
    """
    Return the annotation options of a dataclass field.

    The returned options always carry a name: the annotation's alias, or the
    field's attribute name when the annotation has none.
    """
    annotation = field.metadata.get(tag_name)

    if annotation is None or annotation == "":
        return RenderOptions(name=field.name)

    if isinstance(annotation, RenderOptions):
        return dataclasses.replace(annotation, name=annotation.name or field.name)

    if not isinstance(annotation, str):
        raise InvalidOptionSyntaxError(
            CONSTANTS.INVALID_ANNOTATION_MSG.format(field.name, type(annotation).__name__)
        )

    alias, options = parse_tag(annotation)
    try:
        parsed = parse_options(options)
    except (InvalidOptionSyntaxError, UnknownOptionKeyError) as e:
        raise type(e)(CONSTANTS.FIELD_ERROR_MSG.format(field.name, e)) from e

    parsed.name = alias or field.name
    logger.debug(f"Parsed annotation {annotation!r} for field '{field.name}': {parsed}")
    return parsed
