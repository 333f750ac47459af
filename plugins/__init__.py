"""
Plugins Package
Unmarked Metacard Rejection Plugin

Access plugins and their configuration.
"""

from plugins.access import AccessPlugin, StopProcessing
from plugins.config import load_policy, read_policy_section
from plugins.rejection import (
    REJECT_UNMARKED_ERROR_MESSAGE,
    MarkingPolicy,
    UnmarkedMetacardRejectionPlugin,
)

__all__ = [
    "AccessPlugin",
    "StopProcessing",
    "MarkingPolicy",
    "UnmarkedMetacardRejectionPlugin",
    "REJECT_UNMARKED_ERROR_MESSAGE",
    "read_policy_section",
    "load_policy",
]
