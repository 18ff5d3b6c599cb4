"""Local shell helpers: executable lookup and command execution."""

from .resolver import first_token, is_resolvable
from .runner import CommandOutcome, CommandRunner


__all__ = [
    "CommandOutcome",
    "CommandRunner",
    "first_token",
    "is_resolvable",
]
