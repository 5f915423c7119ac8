"""
Application-facing configuration hooks.
"""

from .form_config import FormGenConfig, set_form_config, get_form_config

__all__ = [
    "FormGenConfig",
    "set_form_config",
    "get_form_config",
]
