from pathlib import Path

import pytest
from omegaconf import OmegaConf

from folio.contexts.layout.registry import get_template_registry
from folio.contexts.rendering.fonts import reset_font_registration

FIXTURES_PATH = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    return OmegaConf.to_container(OmegaConf.load(FIXTURES_PATH / name), resolve=True)


@pytest.fixture
def full_resume() -> dict:
    """Resume content covering every section and the legacy input shapes."""
    return load_fixture("full_resume.yaml")


@pytest.fixture
def sidebar_design() -> dict:
    """Partial design for the modern template with duplicates in sectionOrder."""
    return load_fixture("design_sidebar.yaml")


@pytest.fixture(autouse=True)
def fresh_process_state():
    """Reset the one-time font guard and template lookup cache around every test."""
    reset_font_registration()
    get_template_registry().clear_cache()
    yield
    reset_font_registration()
