"""Configuration helpers for the admin console and poll limits."""

from .poll_rules import DEFAULT_POLL_RULES, PollRules
from .settings import AdminConfig, load_config

__all__ = [
    "AdminConfig",
    "DEFAULT_POLL_RULES",
    "PollRules",
    "load_config",
]
