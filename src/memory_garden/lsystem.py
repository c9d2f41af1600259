"""L-system rewriting and turtle interpretation into branch geometry."""

from __future__ import annotations

import logging
from dataclasses import replace
from math import floor, pi
from typing import Mapping, Optional

from .geometry import IDENTITY, ORIGIN, Quaternion, UP, add, axis_angle, multiply, rotate, scale
from .models import (
    BloomInstance,
    BranchSegment,
    LeafInstance,
    LSystemPreset,
    PlantStructure,
    StructureBuilder,
    TurtleState,
)
from .rng import Draw, centered, create_seed_hash, make_generator

logger = logging.getLogger(__name__)

ALTERNATIVE_MARKER = "|"
LENGTH_DECAY = 0.88
RADIUS_DECAY = 0.8
MIN_SEGMENT_RADIUS = 0.01
DEFAULT_BLOOM_COLOR = "#ef798a"
TIP_FOLLOWERS = {"]", "+"}

TURN_AXIS = (0.0, 0.0, 1.0)
PITCH_AXIS = (1.0, 0.0, 0.0)
ROLL_AXIS = (0.0, 1.0, 0.0)


def expand_lsystem(
    axiom: str,
    rules: Mapping[str, str],
    depth: int,
    randomness: float,
    rng: Draw,
) -> str:
    """Rewrite ``axiom`` ``depth`` times.

    Symbols without a rule are copied through. When ``randomness`` is
    positive, replacements containing ``|`` pick one alternative uniformly
    using ``rng``.
    """

    current = axiom
    for _ in range(max(0, depth)):
        parts: list[str] = []
        for token in current:
            replacement = rules.get(token)
            if not replacement:
                parts.append(token)
                continue
            if randomness > 0 and ALTERNATIVE_MARKER in replacement:
                alternatives = replacement.split(ALTERNATIVE_MARKER)
                index = min(floor(rng() * len(alternatives)), len(alternatives) - 1)
                parts.append(alternatives[index])
            else:
                parts.append(replacement)
        current = "".join(parts)
    return current


def _rotation_table(angle_deg: float) -> dict[str, Quaternion]:
    return {
        "+": axis_angle(TURN_AXIS, angle_deg),
        "-": axis_angle(TURN_AXIS, -angle_deg),
        "&": axis_angle(PITCH_AXIS, angle_deg),
        "^": axis_angle(PITCH_AXIS, -angle_deg),
        "\\": axis_angle(ROLL_AXIS, angle_deg),
        "/": axis_angle(ROLL_AXIS, -angle_deg),
    }


def interpret_directives(preset: LSystemPreset, directives: str, rng: Draw) -> PlantStructure:
    """Walk ``directives`` with a 3D turtle and collect segments, leaves and blooms."""

    rotations = _rotation_table(preset.angle)
    bloom_color = preset.bloom_color or DEFAULT_BLOOM_COLOR
    builder = StructureBuilder()
    stack: list[TurtleState] = []
    state = TurtleState(
        position=ORIGIN,
        orientation=IDENTITY,
        depth=0,
        length=preset.segment_length,
        radius=preset.radius,
    )

    for index, command in enumerate(directives):
        if command == "F":
            heading = rotate(UP, state.orientation)
            end = add(state.position, scale(heading, state.length))
            builder.segments.append(
                BranchSegment(
                    start=state.position,
                    end=end,
                    radius=max(state.radius, MIN_SEGMENT_RADIUS),
                )
            )
            state = replace(state, position=end)

            following = directives[index + 1] if index + 1 < len(directives) else None
            if following is None or following in TIP_FOLLOWERS:
                builder.leaves.append(
                    LeafInstance(
                        position=end,
                        rotation=(centered(rng, 0.6), centered(rng, 0.6), centered(rng, 0.6)),
                        scale=max(0.6 * state.length, 0.2),
                        color=preset.leaf_color,
                    )
                )
        elif command in rotations:
            state = replace(state, orientation=multiply(state.orientation, rotations[command]))
        elif command == "[":
            stack.append(state)
            state = replace(
                state,
                depth=state.depth + 1,
                length=state.length * LENGTH_DECAY,
                radius=state.radius * RADIUS_DECAY,
            )
        elif command == "]":
            # Unbalanced closes leave the turtle where it is.
            if stack:
                state = stack.pop()
        elif command == "*":
            builder.blooms.append(
                BloomInstance(
                    position=state.position,
                    rotation=(centered(rng, pi), centered(rng, pi), centered(rng, pi)),
                    scale=max(state.radius * 3, 0.3),
                    color=bloom_color,
                )
            )

    return builder.build()


def generate_lsystem_structure(
    preset: LSystemPreset,
    stage: int,
    rng: Optional[Draw] = None,
) -> PlantStructure:
    """Expand ``preset`` to ``stage`` (clamped to ``[1, iterations]``) and interpret it.

    Without ``rng`` the stream is seeded from the preset's axiom, so output
    stays reproducible.
    """

    iterations = min(max(int(stage), 1), preset.iterations)
    if rng is None:
        rng = make_generator(create_seed_hash(preset.axiom))
    directives = expand_lsystem(preset.axiom, preset.rules, iterations, preset.randomness, rng)
    structure = interpret_directives(preset, directives, rng)
    logger.debug(
        f"L-system stage {iterations}: {len(directives)} directives, "
        f"{len(structure.segments)} segments, {len(structure.leaves)} leaves, "
        f"{len(structure.blooms)} blooms"
    )
    return structure
