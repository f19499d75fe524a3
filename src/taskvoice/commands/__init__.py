"""Command classification: ordered rules plus the create fallback."""

from .classifier import classify_command
from .rules import COMMAND_RULES, CommandRule

__all__ = ["classify_command", "COMMAND_RULES", "CommandRule"]
