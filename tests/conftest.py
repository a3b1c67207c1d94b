import os

import pytest

from fluid_forge.models import ScaleSettings, SizeEntry


@pytest.fixture
def settings():
    return ScaleSettings.create(min_viewport=375, max_viewport=1620, min_value=16, max_value=20)


@pytest.fixture
def rem_settings():
    return ScaleSettings.create(min_viewport=375, max_viewport=1620, min_value=16, max_value=20, unit="rem")


@pytest.fixture
def var_entries():
    return [
        SizeEntry.fluid(1, "--fs-lg", 20, 26),
        SizeEntry.fluid(2, "--fs-md", 16, 20),
    ]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep FLUID_FORGE_* variables of the developer's shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("FLUID_FORGE_"):
            monkeypatch.delenv(name, raising=False)
