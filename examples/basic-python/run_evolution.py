"""Basic example: evolve bit genomes towards all-ones with a toy driver.

Fitness and selection live here, in the caller; the library only supplies
the genome and its operators.
"""

import numpy as np

from bitgenome import Genome, GenomeConfig
from bitgenome.genetics.bits import GENE_BITS, count_ones


def fitness(genome: Genome) -> float:
    """Fraction of set bits across the whole genome."""
    ones = sum(count_ones(c.genes) for c in genome.chromosomes)
    return ones / (genome.num_genes * GENE_BITS)


def main() -> None:
    rng = np.random.default_rng(0)
    config = GenomeConfig(mutation_probability=1.5, addition_probability=0.0)
    population = [Genome([4, 4], rng=rng, config=config) for _ in range(12)]

    print(f"Starting evolution: population={len(population)}, shape={population[0].shape}")
    print(f"Mutation: {config.mutation_probability}, Addition: {config.addition_probability}\n")

    for generation in range(30):
        population.sort(key=fitness, reverse=True)
        parents = population[: len(population) // 2]
        children = [
            parents[i].spawn_with(parents[(i + 1) % len(parents)])
            for i in range(len(parents))
        ]
        population = parents + children

        best = max(population, key=fitness)
        spread = np.mean([best.diversity_with(g) for g in population])
        if generation % 5 == 0:
            print(f"  Gen {generation}: best={fitness(best):.3f}, diversity={spread:.3f}")

    best = max(population, key=fitness)
    print("\nEvolution complete!")
    print(f"Best fitness: {fitness(best):.3f}")
    print(best)


if __name__ == "__main__":
    main()
