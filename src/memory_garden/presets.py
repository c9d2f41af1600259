"""Species preset table for the memory garden."""

from __future__ import annotations

from math import ceil
from types import MappingProxyType
from typing import Mapping, Union

from .models import GenerationMethod, LSystemPreset, SpaceColonizationPreset, SpeciesKey, SpeciesPreset

SPECIES_PRESETS: Mapping[SpeciesKey, SpeciesPreset] = MappingProxyType({
    SpeciesKey.FERN: SpeciesPreset(
        method=GenerationMethod.LSYSTEM,
        preset=LSystemPreset(
            axiom="X",
            rules={"X": "F[-X][X]F[-X]+X", "F": "FF"},
            angle=22.5,
            segment_length=0.6,
            radius=0.08,
            iterations=5,
            randomness=0.12,
            leaf_color="#8fbf8f",
        ),
    ),
    SpeciesKey.FLOWER: SpeciesPreset(
        method=GenerationMethod.LSYSTEM,
        preset=LSystemPreset(
            axiom="X",
            rules={"X": "F[+X][-X]F*", "F": "FF"},
            angle=28.0,
            segment_length=0.5,
            radius=0.09,
            iterations=4,
            randomness=0.08,
            leaf_color="#9bc6a4",
            bloom_color="#f5a9b8",
        ),
    ),
    SpeciesKey.VINE: SpeciesPreset(
        method=GenerationMethod.SPACE_COLONIZATION,
        preset=SpaceColonizationPreset(
            attractor_count=45,
            influence_radius=1.8,
            kill_radius=0.4,
            step_size=0.55,
            base_radius=0.07,
            leaf_color="#9ac997",
        ),
    ),
})


def get_species_preset(species: Union[SpeciesKey, str]) -> SpeciesPreset:
    """Look up a species; unknown names raise ``ValueError``."""

    return SPECIES_PRESETS[SpeciesKey(species)]


def get_species_max_stage(species: Union[SpeciesKey, str]) -> int:
    entry = get_species_preset(species)
    if entry.method == GenerationMethod.LSYSTEM:
        return entry.preset.iterations
    return max(4, ceil(entry.preset.attractor_count / 6))
