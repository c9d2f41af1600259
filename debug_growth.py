from __future__ import annotations

from memory_garden import SpeciesKey, generate_plant_structure, get_species_max_stage, plant_seed_key


def main() -> None:
    for species in SpeciesKey:
        max_stage = get_species_max_stage(species)
        print(f"{species.value}: max stage={max_stage}")
        for stage in range(1, max_stage + 1):
            structure = generate_plant_structure(species, stage, plant_seed_key(f"debug-{species.value}", stage))
            print(
                "  "
                f"Stage={stage}, "
                f"Segments={len(structure.segments)}, "
                f"Leaves={len(structure.leaves)}, "
                f"Blooms={len(structure.blooms)}"
            )


if __name__ == "__main__":
    main()
