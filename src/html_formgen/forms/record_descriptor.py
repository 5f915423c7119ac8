"""
Per-record field descriptor tables.

A record type is introspected once: its fields, their resolved type hints and
their parsed annotations are captured in a ``RecordDescriptor`` and cached.
Rendering then walks the descriptor instead of re-reading type hints and
re-parsing tag strings for every call.

Descriptors are built lazily on first render, or eagerly with the
``register_record`` class decorator so annotation mistakes surface when the
class is defined.
"""

import dataclasses
import logging
import sys
import types
import typing
from dataclasses import dataclass
from typing import Any, Dict, Optional, Set, Tuple, Type

from html_formgen.forms.exceptions import NotARecordError
from html_formgen.forms.field_info_types import FieldInfo, create_field_info
from html_formgen.forms.form_constants import CONSTANTS
from html_formgen.forms.render_options import RenderOptions
from html_formgen.forms.tag_parsing import options_from_field

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldDescriptor:
    """One record field as seen by the renderer."""
    attr_name: str
    field_type: Any
    options: RenderOptions
    info: FieldInfo

    @property
    def display_name(self) -> str:
        return self.options.name


@dataclass(frozen=True)
class RecordDescriptor:
    """Ordered field descriptors of one record type."""
    record_type: Type
    tag_name: str
    fields: Tuple[FieldDescriptor, ...]


def _resolve_type_hints(record_type: Type) -> Dict[str, Any]:
    """
    Resolve the declared type of every field of a dataclass.

    Postponed annotations that name something outside the module namespace
    (a record defined inside a function, say) stay unresolved strings. Such
    fields still render when they hold a record; type inference rejects them
    otherwise.
    """
    fields = dataclasses.fields(record_type)
    try:
        hints = typing.get_type_hints(record_type)
        return {field.name: hints.get(field.name, field.type) for field in fields}
    except NameError as e:
        logger.debug(f"Resolving {record_type.__name__} hints field by field: {e}")

    module = sys.modules.get(record_type.__module__)
    globalns = vars(module) if module is not None else {}
    localns = dict(vars(record_type))
    resolved = {}
    for field in fields:
        holder = types.SimpleNamespace(__annotations__={field.name: field.type})
        try:
            resolved[field.name] = typing.get_type_hints(holder, globalns, localns)[field.name]
        except (NameError, TypeError):
            resolved[field.name] = field.type
    return resolved


# Maps (record type, tag name) -> descriptor
_DESCRIPTORS: Dict[Tuple[Type, str], RecordDescriptor] = {}


def describe_record(record_type: Type, tag_name: str = CONSTANTS.DEFAULT_TAG_NAME) -> RecordDescriptor:
    """
    Get the descriptor of a dataclass type, building and caching it on first use.

    Raises:
        NotARecordError: If record_type is not a dataclass type.
        InvalidOptionSyntaxError: If a field annotation is malformed.
        UnknownOptionKeyError: If a field annotation names an unknown option.
    """
    key = (record_type, tag_name)
    descriptor = _DESCRIPTORS.get(key)
    if descriptor is not None:
        return descriptor

    if not (isinstance(record_type, type) and dataclasses.is_dataclass(record_type)):
        raise NotARecordError(CONSTANTS.NOT_A_RECORD_MSG.format(record_type))

    hints = _resolve_type_hints(record_type)
    field_descriptors = []
    for field in dataclasses.fields(record_type):
        field_type = hints[field.name]
        field_descriptors.append(FieldDescriptor(
            attr_name=field.name,
            field_type=field_type,
            options=options_from_field(field, tag_name),
            info=create_field_info(field.name, field_type),
        ))

    descriptor = RecordDescriptor(record_type, tag_name, tuple(field_descriptors))
    _DESCRIPTORS[key] = descriptor
    logger.debug(
        f"Described {record_type.__name__} ({tag_name!r} tag): "
        f"{[f.display_name for f in descriptor.fields]}"
    )
    return descriptor


def clear_descriptor_cache() -> None:
    """
    Forget every cached descriptor.

    The cache holds one entry per (record type, tag name) and keeps those
    types alive, so it grows with every record class ever rendered. Callers
    that create record classes dynamically should clear it once they are done
    with them.
    """
    _DESCRIPTORS.clear()


def _describe_tree(record_type: Type, tag_name: str, seen: Set[Type]) -> None:
    if record_type in seen:
        return
    seen.add(record_type)
    for field_descriptor in describe_record(record_type, tag_name).fields:
        nested_type = field_descriptor.info.record_type
        if nested_type is not None:
            _describe_tree(nested_type, tag_name, seen)


def register_record(cls: Optional[Type] = None, *, tag_name: str = CONSTANTS.DEFAULT_TAG_NAME):
    """
    Class decorator that builds descriptors for a record and its nested records.

    Apply it above ``@dataclass``. Works bare or with arguments:

        @register_record
        @dataclass
        class Signup: ...

        @register_record(tag_name="forms")
        @dataclass
        class Profile: ...
    """
    def wrap(record_type: Type) -> Type:
        _describe_tree(record_type, tag_name, set())
        return record_type

    if cls is None:
        return wrap
    return wrap(cls)
