"""
Discriminated union types for record field information.

Instead of carrying boolean flags (is_sequence, is_nested) on every field,
each field is classified into one of a small set of polymorphic types,
selected from its declared type annotation.

Key features:
1. Metaclass auto-registration - every FieldInfo subclass with a matches()
   predicate registers itself, in definition order
2. Type-driven factory - create_field_info() picks the first match
3. Type-safe dispatch - the renderer branches on isinstance()

Architecture:
    - FieldInfoMeta: Metaclass that auto-registers all subclasses
    - FieldInfoBase: Base class for all field info types
    - SequenceFieldInfo: list/tuple/set fields (always rejected when rendered)
    - OptionalRecordInfo: Optional[Dataclass] fields (rendered when set)
    - DirectRecordInfo: Dataclass fields (flattened into the parent)
    - ScalarFieldInfo: everything else (bool/int/str and unsupported kinds)
    - create_field_info(): Factory that auto-selects the correct type
"""

from abc import ABC, ABCMeta
from dataclasses import dataclass, is_dataclass
from typing import List, Optional, Type, Union
import logging

from html_formgen.forms.field_types import is_optional, is_sequence_type, resolve_optional

logger = logging.getLogger(__name__)


@dataclass
class FieldInfoBase(ABC):
    """ABC for field information objects."""
    name: str
    type: Type

    @property
    def record_type(self) -> Optional[Type]:
        """The nested dataclass type, for record-typed fields."""
        return None


class FieldInfoMeta(ABCMeta):
    """
    Metaclass for auto-registration of FieldInfo types.

    All classes with a matches() method are registered in definition order,
    which is also the order the factory tries them in.
    """
    _registry: List[Type] = []

    def __new__(mcs, name, bases, namespace):
        cls = super().__new__(mcs, name, bases, namespace)

        if 'matches' in namespace and callable(namespace['matches']):
            mcs._registry.append(cls)
            logger.debug(f"Auto-registered FieldInfo type: {name}")

        return cls

    @classmethod
    def get_registry(mcs) -> List[Type]:
        """Get all registered FieldInfo types."""
        return mcs._registry.copy()


@dataclass
class SequenceFieldInfo(FieldInfoBase, metaclass=FieldInfoMeta):
    """
    Field info for list-like types.

    Repeated inputs are not supported; rendering such a field fails unless
    the field is skipped.

    Examples:
        tags: List[str]
        scores: Optional[tuple]
    """

    @staticmethod
    def matches(field_type: Type) -> bool:
        return is_sequence_type(field_type)


@dataclass
class OptionalRecordInfo(FieldInfoBase, metaclass=FieldInfoMeta):
    """
    Field info for Optional[Dataclass] types.

    Rendered inline when the field holds a record. A ``None`` value falls
    through to type inference, which has no input type for a record.
    """

    @staticmethod
    def matches(field_type: Type) -> bool:
        return is_optional(field_type) and is_dataclass(resolve_optional(field_type))

    @property
    def record_type(self) -> Optional[Type]:
        return resolve_optional(self.type)


@dataclass
class DirectRecordInfo(FieldInfoBase, metaclass=FieldInfoMeta):
    """Field info for dataclass types, flattened into the parent's inputs."""

    @staticmethod
    def matches(field_type: Type) -> bool:
        return isinstance(field_type, type) and is_dataclass(field_type)

    @property
    def record_type(self) -> Optional[Type]:
        return self.type


@dataclass
class ScalarFieldInfo(FieldInfoBase, metaclass=FieldInfoMeta):
    """
    Field info for everything else.

    Fallback - must be registered last. Whether an input type exists for
    the field is only decided when it is rendered without an explicit type.
    """

    @staticmethod
    def matches(field_type: Type) -> bool:
        return True


FieldInfo = Union[SequenceFieldInfo, OptionalRecordInfo, DirectRecordInfo, ScalarFieldInfo]


def create_field_info(name: str, field_type: Type) -> FieldInfo:
    """
    Factory function that auto-selects the correct FieldInfo subclass.

    Examples:
        >>> type(create_field_info('tags', List[str])).__name__
        'SequenceFieldInfo'
        >>> type(create_field_info('age', int)).__name__
        'ScalarFieldInfo'
    """
    for info_class in FieldInfoMeta.get_registry():
        if info_class.matches(field_type):
            return info_class(name=name, type=field_type)

    raise ValueError(
        f"No matching FieldInfo type for {field_type}. "
        f"ScalarFieldInfo should match everything."
    )
