"""Tests for resolving species, stages and memories into structures."""

from types import MappingProxyType

import pytest

from memory_garden import presets
from memory_garden import (
    SPECIES_PRESETS,
    MemoryImportance,
    MemorySeed,
    SpeciesKey,
    SpeciesPreset,
    GenerationMethod,
    clamp_stage,
    compute_target_stage,
    create_seed_hash,
    generate_lsystem_structure,
    generate_plant_structure,
    make_generator,
    plant_seed_key,
    structure_for_memory,
)


@pytest.mark.parametrize(
    ("stage", "expected"),
    [(-3, 1), (0, 1), (1, 1), (3, 3), (5, 5), (999, 5)],
)
def test_clamp_stage(stage, expected):
    assert clamp_stage(SpeciesKey.FERN, stage) == expected


@pytest.mark.parametrize(
    ("importance", "expected"),
    [(MemoryImportance.LOW, 4), (MemoryImportance.MEDIUM, 5), (MemoryImportance.HIGH, 5)],
)
def test_target_stage_follows_importance(importance, expected):
    assert compute_target_stage(SpeciesKey.FERN, importance) == expected


def test_seed_key_combines_plant_and_stage():
    assert plant_seed_key("seed-abc", 3) == "seed-abc-3"


def test_generate_uses_seed_key_stream():
    expected = generate_lsystem_structure(
        SPECIES_PRESETS[SpeciesKey.FLOWER].preset, 2, make_generator(create_seed_hash("rose-2"))
    )
    assert generate_plant_structure(SpeciesKey.FLOWER, 2, "rose-2") == expected


def test_generate_is_reproducible_and_seed_sensitive():
    first = generate_plant_structure("flower", 3, "memory-1-3")
    again = generate_plant_structure("flower", 3, "memory-1-3")
    other = generate_plant_structure("flower", 3, "memory-2-3")
    assert first == again
    assert first.segments == other.segments
    assert [bloom.rotation for bloom in first.blooms] != [bloom.rotation for bloom in other.blooms]


def test_generate_clamps_stage():
    assert generate_plant_structure("fern", 42, "k") == generate_plant_structure("fern", 5, "k")


def test_bloom_color_override_for_lsystem_species():
    structure = generate_plant_structure(SpeciesKey.FLOWER, 2, "colors", bloom_color="#ffffff")
    assert structure.blooms
    assert {bloom.color for bloom in structure.blooms} == {"#ffffff"}


def test_default_flower_bloom_color():
    structure = generate_plant_structure(SpeciesKey.FLOWER, 1, "colors")
    assert [bloom.color for bloom in structure.blooms] == ["#f5a9b8"]


def test_vine_generation_is_reproducible():
    assert generate_plant_structure("vine", 3, "ivy-3") == generate_plant_structure("vine", 3, "ivy-3")


def test_unknown_species_is_rejected():
    with pytest.raises(ValueError):
        generate_plant_structure("cactus", 1, "k")


def test_memory_defaults_to_target_stage():
    memory = MemorySeed(id="seed-1", species=SpeciesKey.FERN, importance=MemoryImportance.LOW)
    stage, structure = structure_for_memory(memory)
    assert stage == 4
    assert structure == generate_plant_structure(SpeciesKey.FERN, 4, "seed-1-4")


def test_memory_with_explicit_stage_is_clamped():
    memory = MemorySeed(id="seed-2", species=SpeciesKey.FLOWER)
    stage, structure = structure_for_memory(memory, stage=12)
    assert stage == 4
    assert structure == generate_plant_structure(SpeciesKey.FLOWER, 4, "seed-2-4")


def test_dispatch_follows_generation_method(monkeypatch):
    flower = SPECIES_PRESETS[SpeciesKey.FLOWER]
    entry = SpeciesPreset(method=GenerationMethod.LSYSTEM, preset=flower.preset)
    monkeypatch.setattr(presets, "SPECIES_PRESETS", MappingProxyType({**SPECIES_PRESETS, SpeciesKey.VINE: entry}))

    structure = generate_plant_structure(SpeciesKey.VINE, 2, "tagged")
    assert structure == generate_plant_structure(SpeciesKey.FLOWER, 2, "tagged")
    assert structure.blooms
