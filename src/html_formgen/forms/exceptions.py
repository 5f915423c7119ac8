"""Form rendering exceptions."""


class FormRenderError(Exception):
    """Base class for errors raised while rendering a record into inputs."""


class NotARecordError(FormRenderError, TypeError):
    """Raised when the value handed to the renderer is not a dataclass instance."""


class UnsupportedFieldKindError(FormRenderError, TypeError):
    """Raised when no input type can be inferred for a field's declared type."""


class SliceFieldUnsupportedError(FormRenderError, TypeError):
    """Raised when a record contains a list, tuple, set or other sequence field."""


class InvalidOptionSyntaxError(FormRenderError, ValueError):
    """Raised when an annotation option is not a single ``key=value`` pair."""


class UnknownOptionKeyError(FormRenderError, ValueError):
    """Raised when an annotation or override names an option that does not exist."""
