"""Procedural plant-structure generation for the memory garden."""

from .garden import (
    MemoryImportance,
    MemorySeed,
    clamp_stage,
    compute_target_stage,
    generate_plant_structure,
    plant_seed_key,
    structure_for_memory,
)
from .lsystem import expand_lsystem, generate_lsystem_structure, interpret_directives
from .models import (
    BloomInstance,
    BranchSegment,
    GenerationMethod,
    LeafInstance,
    LSystemPreset,
    Node,
    PlantStructure,
    SpaceColonizationPreset,
    SpeciesKey,
    SpeciesPreset,
    TurtleState,
)
from .presets import SPECIES_PRESETS, get_species_max_stage, get_species_preset
from .rng import Draw, create_seed_hash, make_generator, scale_into
from .serialization import preset_to_dict, species_to_dict, structure_to_dict
from .space_colonization import generate_vine_structure, scatter_attractors

__all__ = [
    "BloomInstance",
    "BranchSegment",
    "Draw",
    "GenerationMethod",
    "LSystemPreset",
    "LeafInstance",
    "MemoryImportance",
    "MemorySeed",
    "Node",
    "PlantStructure",
    "SPECIES_PRESETS",
    "SpaceColonizationPreset",
    "SpeciesKey",
    "SpeciesPreset",
    "TurtleState",
    "clamp_stage",
    "compute_target_stage",
    "create_seed_hash",
    "expand_lsystem",
    "generate_lsystem_structure",
    "generate_plant_structure",
    "generate_vine_structure",
    "get_species_max_stage",
    "get_species_preset",
    "interpret_directives",
    "make_generator",
    "plant_seed_key",
    "preset_to_dict",
    "scale_into",
    "scatter_attractors",
    "species_to_dict",
    "structure_for_memory",
    "structure_to_dict",
]
