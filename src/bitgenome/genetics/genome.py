"""Genome - one individual's full set of chromosomes."""

from __future__ import annotations

from typing import Iterable, Sequence

import structlog

from bitgenome.config import GenomeConfig, resolve_config
from bitgenome.genetics.chromosome import Chromosome
from bitgenome.genetics.rng import RandomSource

logger = structlog.get_logger(__name__)


class Genome:
    """An ordered collection of independently owned chromosomes.

    Not thread-safe: callers sharing a genome across threads must serialise
    ``spawn_with`` and any direct chromosome mutation themselves.
    """

    def __init__(
        self,
        lengths: Sequence[int],
        rng: RandomSource | None = None,
        config: GenomeConfig | None = None,
    ) -> None:
        self._rng = rng
        self.config = config
        self.chromosomes: list[Chromosome] = [Chromosome(n, rng=rng) for n in lengths]

    @classmethod
    def from_chromosomes(
        cls,
        chromosomes: Iterable[Chromosome],
        rng: RandomSource | None = None,
        config: GenomeConfig | None = None,
    ) -> Genome:
        """Wrap existing chromosomes; the genome takes ownership without copying."""
        genome = cls([], rng=rng, config=config)
        genome.chromosomes = list(chromosomes)
        return genome

    @property
    def shape(self) -> list[int]:
        """Length of each chromosome, in order."""
        return [len(c) for c in self.chromosomes]

    @property
    def num_genes(self) -> int:
        return sum(len(c) for c in self.chromosomes)

    def __len__(self) -> int:
        return len(self.chromosomes)

    def __str__(self) -> str:
        return "(" + "".join(f"\n {c}" for c in self.chromosomes) + "\n)"

    def __repr__(self) -> str:
        return f"Genome(shape={self.shape!r})"

    def copy(self) -> Genome:
        return Genome.from_chromosomes(
            (c.copy() for c in self.chromosomes), rng=self._rng, config=self.config
        )

    def diversity_with(self, other: Genome) -> float:
        """Mean chromosome diversity over the chromosomes both genomes have.

        Chromosomes present in only one genome are left out of the average.
        """
        shared = min(len(self), len(other))
        if shared == 0:
            logger.warning(
                "diversity_undefined",
                chromosomes=len(self),
                other_chromosomes=len(other),
            )
            raise ValueError("Diversity is undefined for a genome with no chromosomes")

        total = sum(
            mine.diversity_with(theirs)
            for mine, theirs in zip(self.chromosomes, other.chromosomes)
        )
        return total / shared

    def spawn_with(
        self,
        other: Genome,
        mutation_probability: float | None = None,
        addition_probability: float | None = None,
        *,
        config: GenomeConfig | None = None,
    ) -> Genome:
        """Breed a mutated child with this genome as the master parent.

        Each chromosome index present in both parents is bred with
        ``Chromosome.spawn_with`` and then mutated. Master chromosomes with
        no counterpart in ``other`` are dropped, so the child has
        ``min(len(self), len(other))`` chromosomes.
        """
        rates = resolve_config(
            config if config is not None else self.config,
            mutation_probability=mutation_probability,
            addition_probability=addition_probability,
        )

        child = Genome([], rng=self._rng, config=self.config)
        for i, chromosome in enumerate(self.chromosomes):
            if i >= len(other.chromosomes):
                continue
            offspring = chromosome.spawn_with(other.chromosomes[i])
            child.chromosomes.append(offspring.mutate(config=rates))

        logger.debug(
            "genome_spawned",
            master_chromosomes=len(self),
            other_chromosomes=len(other),
            child_chromosomes=len(child),
            dropped=len(self) - len(child),
            num_genes=child.num_genes,
        )
        return child
