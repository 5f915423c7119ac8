"""
html-formgen: HTML input generation from annotated dataclasses.

Walks a dataclass record and emits one ``<input>`` element per field, with
names, types and attributes taken from per-field annotations and from
caller-supplied overrides.

Architecture:
- Protocols: application configuration hooks (FormGenConfig)
- Forms: annotation parsing, field classification, record descriptors and
  the FormRenderer itself

Key Features:
- Type-based input inference (bool, int, str, Optional[...])
- Tag-string or typed (form_field) annotations
- Nested records flattened into one input sequence
- All-or-nothing rendering with typed exceptions
"""

__version__ = "0.1.0"

from html_formgen.forms.exceptions import (
    FormRenderError,
    NotARecordError,
    UnsupportedFieldKindError,
    SliceFieldUnsupportedError,
    InvalidOptionSyntaxError,
    UnknownOptionKeyError,
)
from html_formgen.forms.form_renderer import (
    FormRenderer,
    render,
    render_opts,
    render_each,
    render_each_opts,
    render_input,
)
from html_formgen.forms.render_options import RenderOptions, form_field
from html_formgen.forms.record_descriptor import register_record
from html_formgen.protocols import FormGenConfig, set_form_config, get_form_config

__all__ = [
    "__version__",
    "FormRenderer",
    "render",
    "render_opts",
    "render_each",
    "render_each_opts",
    "render_input",
    "RenderOptions",
    "form_field",
    "register_record",
    "FormGenConfig",
    "set_form_config",
    "get_form_config",
    "FormRenderError",
    "NotARecordError",
    "UnsupportedFieldKindError",
    "SliceFieldUnsupportedError",
    "InvalidOptionSyntaxError",
    "UnknownOptionKeyError",
]
