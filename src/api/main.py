"""FastAPI app serving procedural plant structures to the garden renderer."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from memory_garden import (
    MemoryImportance,
    MemorySeed,
    SpeciesKey,
    clamp_stage,
    generate_plant_structure,
    species_to_dict,
    structure_for_memory,
    structure_to_dict,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Memory Garden Structure API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class StructureRequest(BaseModel):
    species: SpeciesKey
    stage: int = 1
    seed: str = Field(min_length=1, description="Key the structure is seeded from.")
    bloom_color: Optional[str] = None


class MemoryStructureRequest(BaseModel):
    id: str = Field(min_length=1)
    species: SpeciesKey
    importance: MemoryImportance = MemoryImportance.MEDIUM
    stage: Optional[int] = None
    note: Optional[str] = None


def _resolve_species(species: str) -> SpeciesKey:
    try:
        return SpeciesKey(species)
    except ValueError:
        raise HTTPException(status_code=404, detail="Species not found") from None


@app.get("/species")
def list_species() -> dict[str, object]:
    return {"species": [species_to_dict(key) for key in SpeciesKey]}


@app.get("/species/{species}")
def get_species(species: str) -> dict[str, object]:
    return species_to_dict(_resolve_species(species))


@app.post("/structure")
def build_structure(request: StructureRequest) -> dict[str, object]:
    stage = clamp_stage(request.species, request.stage)
    structure = generate_plant_structure(request.species, stage, request.seed, request.bloom_color)
    logger.info(
        f"Built {request.species.value} structure at stage {stage}: "
        f"{len(structure.segments)} segments"
    )
    return {
        "species": request.species.value,
        "stage": stage,
        "structure": structure_to_dict(structure),
    }


@app.post("/memories/structure")
def build_memory_structure(request: MemoryStructureRequest) -> dict[str, object]:
    memory = MemorySeed(
        id=request.id,
        species=request.species,
        importance=request.importance,
        note=request.note,
    )
    stage, structure = structure_for_memory(memory, request.stage)
    logger.info(f"Built structure for memory {memory.id!r} at stage {stage}")
    return {
        "id": memory.id,
        "species": memory.species.value,
        "stage": stage,
        "structure": structure_to_dict(structure),
    }
