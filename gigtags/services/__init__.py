"""
Services package.
"""

from .config_svc import ConfigService, get_default_grammar_config

__all__ = [
    "ConfigService",
    "get_default_grammar_config",
]
