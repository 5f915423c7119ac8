"""
Form rendering.

FormRenderer and supporting infrastructure for automatic HTML input
generation from dataclass records.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .form_renderer import (
        FormRenderer,
        render,
        render_opts,
        render_each,
        render_each_opts,
        render_input,
    )
    from .render_options import RenderOptions, form_field, merge_options
    from .tag_parsing import parse_tag, parse_options, options_from_field
    from .field_types import html_input_type
    from .record_descriptor import (
        RecordDescriptor,
        FieldDescriptor,
        describe_record,
        register_record,
    )
    from .exceptions import (
        FormRenderError,
        NotARecordError,
        UnsupportedFieldKindError,
        SliceFieldUnsupportedError,
        InvalidOptionSyntaxError,
        UnknownOptionKeyError,
    )

_EXPORTS = {
    "FormRenderer": ("html_formgen.forms.form_renderer", "FormRenderer"),
    "render": ("html_formgen.forms.form_renderer", "render"),
    "render_opts": ("html_formgen.forms.form_renderer", "render_opts"),
    "render_each": ("html_formgen.forms.form_renderer", "render_each"),
    "render_each_opts": ("html_formgen.forms.form_renderer", "render_each_opts"),
    "render_input": ("html_formgen.forms.form_renderer", "render_input"),
    "RenderOptions": ("html_formgen.forms.render_options", "RenderOptions"),
    "form_field": ("html_formgen.forms.render_options", "form_field"),
    "merge_options": ("html_formgen.forms.render_options", "merge_options"),
    "parse_tag": ("html_formgen.forms.tag_parsing", "parse_tag"),
    "parse_options": ("html_formgen.forms.tag_parsing", "parse_options"),
    "options_from_field": ("html_formgen.forms.tag_parsing", "options_from_field"),
    "html_input_type": ("html_formgen.forms.field_types", "html_input_type"),
    "RecordDescriptor": ("html_formgen.forms.record_descriptor", "RecordDescriptor"),
    "FieldDescriptor": ("html_formgen.forms.record_descriptor", "FieldDescriptor"),
    "describe_record": ("html_formgen.forms.record_descriptor", "describe_record"),
    "register_record": ("html_formgen.forms.record_descriptor", "register_record"),
    "FormRenderError": ("html_formgen.forms.exceptions", "FormRenderError"),
    "NotARecordError": ("html_formgen.forms.exceptions", "NotARecordError"),
    "UnsupportedFieldKindError": ("html_formgen.forms.exceptions", "UnsupportedFieldKindError"),
    "SliceFieldUnsupportedError": ("html_formgen.forms.exceptions", "SliceFieldUnsupportedError"),
    "InvalidOptionSyntaxError": ("html_formgen.forms.exceptions", "InvalidOptionSyntaxError"),
    "UnknownOptionKeyError": ("html_formgen.forms.exceptions", "UnknownOptionKeyError"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
