"""CLI module for accesstrace - command glue and terminal helpers."""

from .color import print_blue
from .export import run_export, validate_export
from .password import handle_secrets, prompt_password

__all__ = [
    "run_export",
    "validate_export",
    "handle_secrets",
    "prompt_password",
    "print_blue",
]
