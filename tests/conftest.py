"""
Pytest Fixtures for Unmarked Metacard Rejection Tests

Shared metacard and plugin fixtures.
"""

from pathlib import Path

import pytest

from models.metacard import Metacard, SecurityAttribute

# =============================================================================
# PATH FIXTURES
# =============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config_dir(project_root) -> Path:
    """Get the shipped config directory."""
    return project_root / "config"


# =============================================================================
# PLUGIN FIXTURES
# =============================================================================


@pytest.fixture
def plugin():
    """Create a plugin with the default (lenient) policy."""
    from plugins.rejection import UnmarkedMetacardRejectionPlugin
    return UnmarkedMetacardRejectionPlugin()


@pytest.fixture
def strict_plugin(plugin):
    """Plugin with every optional marking required."""
    plugin.classification_system_required = True
    plugin.releasability_required = True
    plugin.codewords_required = True
    plugin.dissemination_controls_required = True
    return plugin


# =============================================================================
# METACARD FIXTURES
# =============================================================================


@pytest.fixture
def minimal_markings() -> dict:
    """Only the always-required markings."""
    return {
        SecurityAttribute.CLASSIFICATION: "S",
        SecurityAttribute.OWNER_PRODUCER: "USA",
    }


@pytest.fixture
def full_markings(minimal_markings) -> dict:
    """Every marking the plugin can require."""
    return {
        **minimal_markings,
        SecurityAttribute.CLASSIFICATION_SYSTEM: "USA",
        SecurityAttribute.RELEASABILITY: ["USA", "GBR"],
        SecurityAttribute.CODEWORDS: "SI",
        SecurityAttribute.DISSEMINATION_CONTROLS: "NOFORN",
    }


@pytest.fixture
def marked_metacard(minimal_markings) -> Metacard:
    """Metacard with classification and owner/producer only."""
    return Metacard.from_values(minimal_markings)


@pytest.fixture
def fully_marked_metacard(full_markings) -> Metacard:
    """Metacard carrying every security marking."""
    return Metacard.from_values(full_markings)
