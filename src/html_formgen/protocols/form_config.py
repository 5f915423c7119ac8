"""Base configuration class for form rendering.

Provides hooks for applications to customize how records are rendered.
"""

from typing import Optional
from dataclasses import dataclass

from html_formgen.forms.form_constants import CONSTANTS


@dataclass
class FormGenConfig:
    """Base configuration for form rendering behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        tag_name: Field metadata key holding each field's annotation
        fragment_separator: Text appended after every input by render()
        logger_name: Logger that receives the per-render summary messages
    """

    tag_name: str = CONSTANTS.DEFAULT_TAG_NAME
    fragment_separator: str = CONSTANTS.DEFAULT_FRAGMENT_SEPARATOR
    logger_name: str = "html_formgen"


# Global config instance (set by application)
_form_config: Optional[FormGenConfig] = None


def set_form_config(config: Optional[FormGenConfig]) -> None:
    """Set the global form rendering configuration.

    Args:
        config: FormGenConfig instance, or None to restore the defaults
    """
    global _form_config
    _form_config = config


def get_form_config() -> FormGenConfig:
    """Get the current form rendering configuration.

    Returns:
        Current FormGenConfig or default if not set
    """
    if _form_config is None:
        return FormGenConfig()
    return _form_config
