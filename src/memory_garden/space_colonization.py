"""Space-colonization growth toward a cloud of attraction points."""

from __future__ import annotations

import logging
from math import cos, inf, pi, sin

from .geometry import ORIGIN, Vector3, add, distance_squared, normalize, scale, subtract
from .models import (
    BloomInstance,
    BranchSegment,
    LeafInstance,
    Node,
    PlantStructure,
    SpaceColonizationPreset,
    StructureBuilder,
)
from .rng import Draw, centered

logger = logging.getLogger(__name__)

DEFAULT_VINE_BLOOM_COLOR = "#d4f1cd"
MIN_NODE_RADIUS = 0.02
RADIUS_TAPER = 0.92
LEAF_CHANCE_THRESHOLD = 0.4
ATTRACTOR_MIN_DISTANCE = 1.5
ATTRACTOR_DISTANCE_SPAN = 2.5
ATTRACTOR_MIN_HEIGHT = 1.0
ATTRACTOR_HEIGHT_SPAN = 5.0


def max_growth_steps(stage: int) -> int:
    return max(8, stage * 16)


def scatter_attractors(count: int, rng: Draw) -> list[Vector3]:
    """Place ``count`` attractors in a cylindrical shell around the trunk."""

    attractors: list[Vector3] = []
    for _ in range(count):
        theta = rng() * pi * 2
        distance = ATTRACTOR_MIN_DISTANCE + rng() * ATTRACTOR_DISTANCE_SPAN
        height = ATTRACTOR_MIN_HEIGHT + rng() * ATTRACTOR_HEIGHT_SPAN
        attractors.append((cos(theta) * distance, height, sin(theta) * distance))
    return attractors


def assign_attractors(
    attractors: list[Vector3],
    nodes: list[Node],
    active_tips: list[int],
    influence_sq: float,
    kill_sq: float,
) -> tuple[dict[int, Vector3], list[Vector3]]:
    """Sum unit pulls per tip and return the attractors that survive this step."""

    pulls: dict[int, Vector3] = {}
    survivors: list[Vector3] = []
    for attractor in attractors:
        closest_tip = None
        closest_sq = inf
        consumed = False
        for tip_index in active_tips:
            distance_sq = distance_squared(attractor, nodes[tip_index].position)
            if distance_sq < kill_sq:
                consumed = True
                break
            if distance_sq <= influence_sq and distance_sq < closest_sq:
                closest_sq = distance_sq
                closest_tip = tip_index
        if consumed:
            continue
        survivors.append(attractor)
        if closest_tip is None:
            continue
        pull = normalize(subtract(attractor, nodes[closest_tip].position))
        pulls[closest_tip] = add(pulls.get(closest_tip, ORIGIN), pull)
    return pulls, survivors


def generate_vine_structure(
    preset: SpaceColonizationPreset,
    stage: int,
    rng: Draw,
    bloom_color: str = DEFAULT_VINE_BLOOM_COLOR,
) -> PlantStructure:
    """Grow a vine for ``stage`` and flatten it into a ``PlantStructure``."""

    stage = max(1, int(stage))
    attractors = scatter_attractors(preset.attractor_count, rng)
    nodes = [Node(position=ORIGIN, parent_index=None, depth=0, radius=preset.base_radius)]
    active_tips = [0]
    builder = StructureBuilder()

    influence_sq = preset.influence_radius ** 2
    kill_sq = preset.kill_radius ** 2
    steps_taken = 0

    for _ in range(max_growth_steps(stage)):
        if not attractors or not active_tips:
            break
        pulls, attractors = assign_attractors(attractors, nodes, active_tips, influence_sq, kill_sq)
        if not pulls:
            break
        steps_taken += 1

        new_tips: list[int] = []
        for tip_index, pull in pulls.items():
            tip = nodes[tip_index]
            step_length = preset.step_size * max(0.4, 1 - tip.depth * 0.05)
            position = add(tip.position, scale(normalize(pull), step_length))
            node = Node(
                position=position,
                parent_index=tip_index,
                depth=tip.depth + 1,
                radius=max(tip.radius * RADIUS_TAPER, MIN_NODE_RADIUS),
            )
            new_tips.append(len(nodes))
            nodes.append(node)
            builder.segments.append(BranchSegment(start=tip.position, end=position, radius=node.radius))

            if rng() > LEAF_CHANCE_THRESHOLD:
                offset = (centered(rng, 0.3), centered(rng, 0.2), centered(rng, 0.3))
                builder.leaves.append(
                    LeafInstance(
                        position=add(position, offset),
                        rotation=(centered(rng, 0.8), centered(rng, 0.8), centered(rng, 0.8)),
                        scale=0.25 + rng() * 0.35,
                        color=preset.leaf_color,
                    )
                )
        active_tips = new_tips

    if len(nodes) > 1:
        last = nodes[-1]
        builder.blooms.append(
            BloomInstance(
                position=last.position,
                rotation=(centered(rng, 0.6), centered(rng, 0.6), centered(rng, 0.6)),
                scale=0.2 + rng() * 0.4,
                color=bloom_color,
            )
        )

    logger.debug(
        f"Vine stage {stage}: {steps_taken} growth steps, {len(nodes)} nodes, "
        f"{len(attractors)} attractors left"
    )
    return builder.build()
