"""Resolve a planted memory into the structure the renderer draws."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from .lsystem import generate_lsystem_structure
from .models import GenerationMethod, PlantStructure, SpeciesKey
from .presets import get_species_max_stage, get_species_preset
from .rng import create_seed_hash, make_generator
from .space_colonization import DEFAULT_VINE_BLOOM_COLOR, generate_vine_structure

logger = logging.getLogger(__name__)


class MemoryImportance(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


IMPORTANCE_STAGE_DELTA: dict[MemoryImportance, int] = {
    MemoryImportance.LOW: -1,
    MemoryImportance.MEDIUM: 0,
    MemoryImportance.HIGH: 1,
}


@dataclass(frozen=True)
class MemorySeed:
    """A user memory planted in the garden."""

    id: str
    species: SpeciesKey
    importance: MemoryImportance = MemoryImportance.MEDIUM
    note: Optional[str] = None


def clamp_stage(species: Union[SpeciesKey, str], stage: int) -> int:
    return min(max(int(stage), 1), get_species_max_stage(species))


def compute_target_stage(species: Union[SpeciesKey, str], importance: MemoryImportance) -> int:
    """Stage a newly planted memory grows toward."""

    max_stage = get_species_max_stage(species)
    return clamp_stage(species, max_stage + IMPORTANCE_STAGE_DELTA[MemoryImportance(importance)])


def plant_seed_key(plant_id: str, stage: int) -> str:
    return f"{plant_id}-{stage}"


def generate_plant_structure(
    species: Union[SpeciesKey, str],
    stage: int,
    seed_key: str,
    bloom_color: Optional[str] = None,
) -> PlantStructure:
    """Build the structure for ``species`` at ``stage`` from a fresh generator seeded by ``seed_key``."""

    entry = get_species_preset(species)
    stage = clamp_stage(species, stage)
    rng = make_generator(create_seed_hash(seed_key))
    logger.debug(f"Generating {SpeciesKey(species).value} at stage {stage} from seed key {seed_key!r}")

    if entry.method == GenerationMethod.LSYSTEM:
        preset = entry.preset
        if bloom_color:
            preset = replace(preset, bloom_color=bloom_color)
        return generate_lsystem_structure(preset, stage, rng)
    return generate_vine_structure(entry.preset, stage, rng, bloom_color or DEFAULT_VINE_BLOOM_COLOR)


def structure_for_memory(memory: MemorySeed, stage: Optional[int] = None) -> tuple[int, PlantStructure]:
    """Return the stage used and the structure for ``memory``.

    Without an explicit ``stage`` the memory's target stage is used.
    """

    if stage is None:
        stage = compute_target_stage(memory.species, memory.importance)
    stage = clamp_stage(memory.species, stage)
    structure = generate_plant_structure(memory.species, stage, plant_seed_key(memory.id, stage))
    return stage, structure
