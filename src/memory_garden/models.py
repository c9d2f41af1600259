"""Presets, intermediate growth state, and the render-ready plant structure."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from .geometry import Quaternion, Vector3


class SpeciesKey(str, Enum):
    FERN = "fern"
    FLOWER = "flower"
    VINE = "vine"


class GenerationMethod(str, Enum):
    LSYSTEM = "lsystem"
    SPACE_COLONIZATION = "space"


@dataclass(frozen=True)
class BranchSegment:
    start: Vector3
    end: Vector3
    radius: float


@dataclass(frozen=True)
class LeafInstance:
    position: Vector3
    rotation: Vector3
    scale: float
    color: str


@dataclass(frozen=True)
class BloomInstance:
    position: Vector3
    rotation: Vector3
    scale: float
    color: str


@dataclass(frozen=True)
class PlantStructure:
    """Flattened snapshot handed to the renderer."""

    segments: Tuple[BranchSegment, ...] = ()
    leaves: Tuple[LeafInstance, ...] = ()
    blooms: Tuple[BloomInstance, ...] = ()


@dataclass(frozen=True)
class LSystemPreset:
    """Rewriting rules and turtle parameters for one species.

    ``iterations`` doubles as the species' maximum growth stage. A rule
    replacement may hold several alternatives separated by ``|``; they are
    only chosen between when ``randomness`` is positive.
    """

    axiom: str
    rules: Mapping[str, str]
    angle: float
    segment_length: float
    radius: float
    iterations: int
    leaf_color: str
    randomness: float = 0.0
    bloom_color: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "rules", MappingProxyType(dict(self.rules)))


@dataclass(frozen=True)
class SpaceColonizationPreset:
    attractor_count: int
    influence_radius: float
    kill_radius: float
    step_size: float
    base_radius: float
    leaf_color: str

    def __post_init__(self) -> None:
        if self.kill_radius >= self.influence_radius:
            raise ValueError("kill_radius must be smaller than influence_radius")


@dataclass(frozen=True)
class SpeciesPreset:
    method: GenerationMethod
    preset: Union[LSystemPreset, SpaceColonizationPreset]

    def __post_init__(self) -> None:
        expected = LSystemPreset if self.method == GenerationMethod.LSYSTEM else SpaceColonizationPreset
        if not isinstance(self.preset, expected):
            raise ValueError(f"{self.method.value} species need a {expected.__name__}")


@dataclass(frozen=True)
class TurtleState:
    position: Vector3
    orientation: Quaternion
    depth: int
    length: float
    radius: float


@dataclass(frozen=True)
class Node:
    """Space-colonization tree node; ``parent_index`` is ``None`` only for the root."""

    position: Vector3
    parent_index: Optional[int]
    depth: int
    radius: float


@dataclass
class StructureBuilder:
    """Mutable accumulator used while a single structure is generated."""

    segments: list[BranchSegment] = field(default_factory=list)
    leaves: list[LeafInstance] = field(default_factory=list)
    blooms: list[BloomInstance] = field(default_factory=list)

    def build(self) -> PlantStructure:
        return PlantStructure(
            segments=tuple(self.segments),
            leaves=tuple(self.leaves),
            blooms=tuple(self.blooms),
        )
