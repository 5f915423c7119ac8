"""
Typed rendering options for a single form field.

``RenderOptions`` is the resolved HTML attribute set for one ``<input>``
element. The same type is used for three things:

- options parsed from a field annotation (tag string or ``form_field()``)
- per-field overrides supplied by the caller
- the final, merged options handed to the emitter

Merging is per attribute: the override wins when its attribute is set,
the annotation fills the gaps.
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from html_formgen.forms.exceptions import InvalidOptionSyntaxError, UnknownOptionKeyError
from html_formgen.forms.form_constants import CONSTANTS


@dataclass
class RenderOptions:
    """HTML attributes for one input element.

    Attributes:
        type: Input type (``text``, ``password``, ...). Empty means infer it.
        css_class: Value of the ``class`` attribute. Empty means omit it.
        id: Value of the ``id`` attribute. Empty means omit it.
        name: Value of the ``name`` attribute. ``-`` skips the field.
        value: Value of the ``value`` attribute. ``None`` means unset; an
            explicit ``""`` forces an empty attribute.
    """
    type: str = ""
    css_class: str = ""
    id: str = ""
    name: str = ""
    value: Any = None

    def __post_init__(self):
        for attr in ("type", "css_class", "id", "name"):
            attr_value = getattr(self, attr)
            if not isinstance(attr_value, str):
                raise InvalidOptionSyntaxError(
                    CONSTANTS.INVALID_OPTION_VALUE_MSG.format(attr, attr_value)
                )

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> "RenderOptions":
        """
        Build options from a plain mapping such as ``{"name": "email"}``.

        Both ``class`` and ``css_class`` are accepted for the class attribute.

        Raises:
            UnknownOptionKeyError: If the mapping contains any other key.
            InvalidOptionSyntaxError: If both ``class`` and ``css_class`` are given.
        """
        unknown = set(options) - CONSTANTS.OVERRIDE_OPTION_KEYS
        if unknown:
            raise UnknownOptionKeyError(
                CONSTANTS.INVALID_OPTION_KEY_MSG.format(sorted(unknown)[0])
            )

        kwargs = dict(options)
        if CONSTANTS.OPTION_CLASS in kwargs and "css_class" in kwargs:
            raise InvalidOptionSyntaxError(CONSTANTS.DUPLICATE_CLASS_KEY_MSG)
        if CONSTANTS.OPTION_CLASS in kwargs:
            kwargs["css_class"] = kwargs.pop(CONSTANTS.OPTION_CLASS)
        return cls(**kwargs)


OptionsLike = Union[RenderOptions, Mapping[str, Any]]


def coerce_options(options: Optional[OptionsLike]) -> RenderOptions:
    """Return ``options`` as a ``RenderOptions``; ``None`` becomes empty options."""
    if options is None:
        return RenderOptions()
    if isinstance(options, RenderOptions):
        return options
    return RenderOptions.from_mapping(options)


def merge_options(options: RenderOptions, defaults: RenderOptions) -> RenderOptions:
    """
    Fill every unset attribute of ``options`` from ``defaults``.

    Neither argument is modified.

    Example:
        >>> merge_options(RenderOptions(name="email"), RenderOptions(name="username", type="text"))
        RenderOptions(type='text', css_class='', id='', name='email', value=None)
    """
    return dataclasses.replace(
        options,
        type=options.type or defaults.type,
        css_class=options.css_class or defaults.css_class,
        id=options.id or defaults.id,
        name=options.name or defaults.name,
        value=defaults.value if options.value is None else options.value,
    )


def form_field(
    name: Optional[str] = None,
    *,
    type: str = "",
    css_class: str = "",
    id: str = "",
    value: Any = None,
    tag_name: str = CONSTANTS.DEFAULT_TAG_NAME,
    **field_kwargs,
):
    """
    Declare a dataclass field together with its rendering options.

    A typed alternative to tag strings; the options are validated when the
    class body runs.

    Args:
        name: Form name of the field; defaults to the attribute name.
        type, css_class, id, value: Annotation defaults for the input.
        tag_name: Metadata key the options are stored under.
        **field_kwargs: Forwarded to ``dataclasses.field`` (``default``,
            ``default_factory``, ...).

    Example:
        @dataclass
        class Login:
            username: str = form_field("email", type="email", default="")
            password: str = form_field(type="password", default="")
    """
    options = RenderOptions(type=type, css_class=css_class, id=id, name=name or "", value=value)
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[tag_name] = options
    return dataclasses.field(metadata=metadata, **field_kwargs)
