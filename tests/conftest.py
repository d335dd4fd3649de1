"""Pytest configuration for the validmsg test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 500 examples (thorough property testing)
- ci: GitHub Actions with 50 examples (fast CI feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile (GitHub Actions sets this)
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from hypothesis import Phase, Verbosity, settings

from validmsg.defaults import reset_default_registry
from validmsg.localization import LocaleRegistry

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Development profile: thorough local testing (500 examples, silent)
settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

# CI profile: fast feedback for GitHub Actions (50 examples)
settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

# Verbose profile: debug mode with progress visibility (100 examples)
settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


# =============================================================================
# AUTO-DETECT EXECUTION CONTEXT
# =============================================================================


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var (GitHub Actions auto-detection)
    3. Default to "dev" (local development)
    """
    import os

    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit

    if os.environ.get("CI") == "true":
        return "ci"

    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================

EN_MESSAGES = {
    "locale": "en",
    "string": {
        "required": "{fieldName} is required",
        "tooShort": "{fieldName} must be at least {min} characters",
        "tooLong": "{fieldName} must be at most {max} characters",
    },
    "phone": {
        "mustBeValidPhone": "{fieldName} must be a valid phone number (e.g. {e164} or {national})",
        "examples": {"e164": "+11234567890", "national": "1234567890"},
    },
}

ES_MESSAGES = {
    "locale": "es",
    "string": {
        "required": "{fieldName} es obligatorio",
        "tooShort": "{fieldName} debe tener al menos {min} caracteres",
    },
}


@pytest.fixture
def registry() -> LocaleRegistry:
    """Registry with small en and es trees; en is current and fallback."""
    return LocaleRegistry(messages={"en": EN_MESSAGES, "es": ES_MESSAGES})


@pytest.fixture
def clean_defaults(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Reset the process-wide registry around a test."""
    monkeypatch.delenv("VALIDMSG_LOCALE", raising=False)
    reset_default_registry()
    yield
    reset_default_registry()
