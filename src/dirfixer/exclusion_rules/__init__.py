"""Exclusion rules for leaving files and directories out of a walk."""

from .base_rules import BaseExclusionRules
from .git_rules import GitIgnoreExclusionRules

__all__ = [
    "BaseExclusionRules",
    "GitIgnoreExclusionRules",
]
