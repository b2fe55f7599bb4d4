"""
Pytest fixtures and configuration for the test suite.

- Config tests get an isolated environment (no GIGTAGS_* leakage)
- The process-wide default grammar config is reset around each test
"""

import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add project root to path so tests can import gigtags package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from gigtags.helpers.dto.config_dto import GrammarConfig  # noqa: E402
from gigtags.services.config_svc import get_default_grammar_config  # noqa: E402


# === CONFIG FIXTURES ===


@pytest.fixture(autouse=True)
def reset_default_grammar_config() -> Generator[None, None, None]:
    """Drop the memoized default config before and after each test."""
    get_default_grammar_config.cache_clear()
    yield
    get_default_grammar_config.cache_clear()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Remove GIGTAGS_* variables and run from an empty working directory."""
    for key in list(os.environ):
        if key.startswith("GIGTAGS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def grammar_config() -> GrammarConfig:
    """Provide the built-in default grammar config."""
    return GrammarConfig()


@pytest.fixture
def facet_policy_config() -> GrammarConfig:
    """Provide a config that collapses duplicates by facet alone."""
    return GrammarConfig(duplicate_policy="facet")


# === SAMPLE INPUTS ===


@pytest.fixture
def representative_inputs() -> list[str]:
    """Inputs mixing prose, punctuation, unicode and adjacent tags."""
    return [
        "",
        "Plain title without any tags",
        "Warm up #energy:low #genre:deep-house",
        "#date:2024-07-01T22%3A00%3A00",
        "Opener (Extended Mix) #bpm:124, #key:8A; #vibe:sunrise!",
        "#artist:Bj%C3%B6rk #mood:fröhlich #城市:東京",
        "#a-#b-#c",
        "#a:b#c:d glued",
        "C#minor and F#major stay prose",
        "#mood:dark #mood:dark #mood:light",
        "## # #: #mood: #bad:%zz #bad:%FF",
        "#link:https%3A%2F%2Fexample%2Ecom%2Fset%3Fid%3D42 tail",
        "line one #a\nline two #b:c\ttabbed",
        "#x:a:b:c #y:100%25",
        "#played~20240701 #played~20240702:twice",
        "#b #a:#b%41",
        "#b:1 #a:#b%42 #k:%41 #k:A",
    ]
