"""Shared pytest setup for the strict-money-parse tests.

Hypothesis example counts are set here and nowhere else:
- dev: 500 examples per property, for local runs
- ci: 50 examples with a fixed seed, so a failing CI run reproduces locally
- verbose: 100 examples, printing every generated price string

The profile comes from HYPOTHESIS_PROFILE when it names one of the above,
otherwise "ci" when CI=true, otherwise "dev".

Tests marked @pytest.mark.fuzz (arbitrary-Unicode parser runs) are skipped
unless selected with: pytest -m fuzz
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=500,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Pick the profile name from the environment, falling back to "dev"."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZ MARKER
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker used by the arbitrary-input parser runs."""
    config.addinivalue_line(
        "markers",
        "fuzz: arbitrary-input parser runs (skipped unless selected with -m fuzz)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless the -m expression selects them."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="arbitrary-input parser run; select with -m fuzz")
    for item in items:
        if item.get_closest_marker("fuzz") is not None:
            item.add_marker(skip_fuzz)
