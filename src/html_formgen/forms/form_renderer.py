"""
HTML form renderer.

Walks a dataclass instance depth-first in field declaration order and emits
one ``<input>`` element per renderable field:

    @dataclass
    class NewUserForm:
        username: str = field(default="", metadata={"form": "username,type=text"})
        password: str = field(default="", metadata={"form": "password,type=password"})

    render(NewUserForm(username="filwisher"))
    # <input type="text" name="username" value="filwisher">
    # <input type="password" name="password">

Nested records are flattened into the same sequence. Rendering is
all-or-nothing: any error aborts the whole call and nothing is returned.
"""

import dataclasses
import logging
from typing import Any, Dict, List, Mapping, Optional

from markupsafe import Markup, escape

from html_formgen.forms.exceptions import (
    NotARecordError,
    SliceFieldUnsupportedError,
    UnsupportedFieldKindError,
)
from html_formgen.forms.field_info_types import SequenceFieldInfo
from html_formgen.forms.field_types import format_value, html_input_type, is_zero_value
from html_formgen.forms.form_constants import CONSTANTS
from html_formgen.forms.record_descriptor import FieldDescriptor, describe_record
from html_formgen.forms.render_options import OptionsLike, RenderOptions, coerce_options, merge_options
from html_formgen.protocols.form_config import FormGenConfig, get_form_config

logger = logging.getLogger(__name__)

OptionOverrides = Mapping[str, OptionsLike]


def _is_record(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def render_input(options: RenderOptions) -> Markup:
    """
    Emit one input element from fully resolved options.

    Attribute order is fixed: type, name, class, id, value. Empty class and id
    are omitted, as is a ``None`` value. Every attribute value is escaped.
    """
    parts = [f'<input type="{escape(options.type)}" name="{escape(options.name)}"']
    if options.css_class:
        parts.append(f' class="{escape(options.css_class)}"')
    if options.id:
        parts.append(f' id="{escape(options.id)}"')
    if options.value is not None:
        parts.append(f' value="{escape(format_value(options.value))}"')
    parts.append(">")
    return Markup("".join(parts))


class FormRenderer:
    """
    Renders dataclass records into HTML input elements.

    Args:
        config: Rendering configuration. When omitted, the global form
            configuration is read on every call.
    """

    def __init__(self, config: Optional[FormGenConfig] = None):
        self._config = config

    @property
    def config(self) -> FormGenConfig:
        return self._config or get_form_config()

    def render(self, record: Any) -> Markup:
        """Render every input of ``record`` as a single fragment."""
        return self.render_opts(record, None)

    def render_opts(self, record: Any, overrides: Optional[OptionOverrides]) -> Markup:
        """Render every input of ``record`` as a single fragment, applying overrides."""
        separator = self.config.fragment_separator
        parts = self.render_each_opts(record, overrides)
        return Markup("".join(f"{part}{separator}" for part in parts))

    def render_each(self, record: Any) -> List[Markup]:
        """Render ``record`` into one input element per field."""
        return self.render_each_opts(record, None)

    def render_each_opts(self, record: Any, overrides: Optional[OptionOverrides]) -> List[Markup]:
        """
        Render ``record`` into one input element per field, applying overrides.

        Args:
            record: A dataclass instance.
            overrides: Per-field options keyed by form name. Each value is a
                ``RenderOptions`` or a mapping with the keys type, class, id,
                name and value. Set attributes win over the field annotation.

        Raises:
            NotARecordError: If record is not a dataclass instance.
            SliceFieldUnsupportedError: If a rendered field is list-like.
            UnsupportedFieldKindError: If no input type can be inferred for a field.
            InvalidOptionSyntaxError: If a field annotation is malformed.
            UnknownOptionKeyError: If an annotation or override names an unknown option.
        """
        if not _is_record(record):
            raise NotARecordError(CONSTANTS.NOT_A_RECORD_MSG.format(type(record).__name__))

        resolved_overrides = {
            name: coerce_options(options) for name, options in (overrides or {}).items()
        }
        config = self.config
        inputs = self._render_record(record, resolved_overrides, config.tag_name)
        logging.getLogger(config.logger_name).debug(
            f"Rendered {type(record).__name__} into {len(inputs)} inputs"
        )
        return inputs

    def _render_record(self, record: Any, overrides: Dict[str, RenderOptions],
                       tag_name: str) -> List[Markup]:
        descriptor = describe_record(type(record), tag_name)
        out: List[Markup] = []

        for field_descriptor in descriptor.fields:
            override = overrides.get(field_descriptor.display_name)
            options = merge_options(override or RenderOptions(), field_descriptor.options)

            if CONSTANTS.SKIP_FIELD_NAME in (field_descriptor.display_name, options.name):
                logger.debug(f"Skipping field '{field_descriptor.attr_name}' of {descriptor.record_type.__name__}")
                continue

            value = getattr(record, field_descriptor.attr_name)

            if _is_record(value):
                out.extend(self._render_record(value, overrides, tag_name))
                continue

            if isinstance(field_descriptor.info, SequenceFieldInfo):
                raise SliceFieldUnsupportedError(CONSTANTS.SLICE_FIELD_MSG.format(
                    field_descriptor.attr_name, field_descriptor.field_type
                ))

            # An explicit override value, even "", beats the field's current value
            if (override is None or override.value is None) and not is_zero_value(value):
                options = dataclasses.replace(options, value=value)

            if not options.type:
                options = dataclasses.replace(options, type=self._infer_type(field_descriptor))

            out.append(render_input(options))

        return out

    @staticmethod
    def _infer_type(field_descriptor: FieldDescriptor) -> str:
        if field_descriptor.info.record_type is not None:
            raise UnsupportedFieldKindError(CONSTANTS.NESTED_RECORD_MISSING_MSG.format(
                field_descriptor.attr_name, field_descriptor.field_type
            ))
        try:
            return html_input_type(field_descriptor.field_type)
        except UnsupportedFieldKindError as e:
            raise UnsupportedFieldKindError(
                CONSTANTS.FIELD_ERROR_MSG.format(field_descriptor.attr_name, e)
            ) from e


_default_renderer = FormRenderer()


def render(record: Any) -> Markup:
    """Render every input of ``record`` as one newline-terminated fragment."""
    return _default_renderer.render(record)


def render_opts(record: Any, overrides: Optional[OptionOverrides]) -> Markup:
    """Like render(), with per-field overrides keyed by form name."""
    return _default_renderer.render_opts(record, overrides)


def render_each(record: Any) -> List[Markup]:
    """Render ``record`` into a list of input elements."""
    return _default_renderer.render_each(record)


def render_each_opts(record: Any, overrides: Optional[OptionOverrides]) -> List[Markup]:
    """Like render_each(), with per-field overrides keyed by form name."""
    return _default_renderer.render_each_opts(record, overrides)
