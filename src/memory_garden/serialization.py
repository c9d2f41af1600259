"""Serialization helpers for API and rendering clients."""

from __future__ import annotations

from dataclasses import fields

from .models import BloomInstance, BranchSegment, LeafInstance, PlantStructure, SpeciesKey
from .presets import get_species_max_stage, get_species_preset


def segment_to_dict(segment: BranchSegment) -> dict[str, object]:
    return {
        "start": list(segment.start),
        "end": list(segment.end),
        "radius": segment.radius,
    }


def instance_to_dict(instance: LeafInstance | BloomInstance) -> dict[str, object]:
    return {
        "position": list(instance.position),
        "rotation": list(instance.rotation),
        "scale": instance.scale,
        "color": instance.color,
    }


def structure_to_dict(structure: PlantStructure) -> dict[str, object]:
    return {
        "segments": [segment_to_dict(segment) for segment in structure.segments],
        "leaves": [instance_to_dict(leaf) for leaf in structure.leaves],
        "blooms": [instance_to_dict(bloom) for bloom in structure.blooms],
    }


def preset_to_dict(species: SpeciesKey | str) -> dict[str, object]:
    entry = get_species_preset(species)
    parameters = {item.name: getattr(entry.preset, item.name) for item in fields(entry.preset)}
    if "rules" in parameters:
        parameters["rules"] = dict(parameters["rules"])
    return {"method": entry.method.value, "parameters": parameters}


def species_to_dict(species: SpeciesKey | str) -> dict[str, object]:
    key = SpeciesKey(species)
    return {
        "species": key.value,
        "max_stage": get_species_max_stage(key),
        **preset_to_dict(key),
    }
