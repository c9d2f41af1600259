"""Shared fixtures for plant-structure tests."""

import pytest

from memory_garden import LSystemPreset, SpaceColonizationPreset, create_seed_hash, make_generator


@pytest.fixture
def seeded_draw():
    """Provide a deterministic draw stream for tests."""
    return make_generator(create_seed_hash("fern-1"))


@pytest.fixture
def simple_preset():
    """Straight-growing L-system preset with a unit angle of 90 degrees."""
    return LSystemPreset(
        axiom="F",
        rules={"F": "FF"},
        angle=90.0,
        segment_length=1.0,
        radius=0.1,
        iterations=3,
        leaf_color="#00ff00",
    )


@pytest.fixture
def wide_vine_preset():
    """Vine preset whose influence radius covers the whole attractor shell."""
    return SpaceColonizationPreset(
        attractor_count=30,
        influence_radius=8.0,
        kill_radius=0.3,
        step_size=0.5,
        base_radius=0.05,
        leaf_color="#9ac997",
    )
