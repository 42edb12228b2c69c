"""Chromosome - an ordered sequence of 32-bit genes."""

from __future__ import annotations

import operator
from typing import Iterable, Iterator

import numpy as np

from bitgenome.config import GenomeConfig, resolve_config
from bitgenome.genetics.bits import (
    GENE_BITS,
    as_genes,
    bit_mask,
    count_ones,
    random_genes,
    split_mutation_probability,
)
from bitgenome.genetics.rng import RandomSource, get_rng


class Chromosome:
    """A mutable run of unsigned 32-bit genes.

    Every bit of every gene can be flipped by ``mutate``; the chromosome can
    grow by one gene per ``mutate`` call but never shrinks.
    """

    def __init__(self, length: int, rng: RandomSource | None = None) -> None:
        length = operator.index(length)
        if length < 0:
            raise ValueError(f"Chromosome length must be non-negative, got {length}")
        self._rng = rng
        self._genes = random_genes(self.rng, length)

    @classmethod
    def from_genes(cls, genes: Iterable[int], rng: RandomSource | None = None) -> Chromosome:
        """Build a chromosome holding exactly ``genes`` (wrapped to 32 bits)."""
        chromosome = cls(0, rng=rng)
        chromosome.genes = genes
        return chromosome

    @property
    def rng(self) -> RandomSource:
        return self._rng if self._rng is not None else get_rng()

    @property
    def genes(self) -> np.ndarray:
        return self._genes

    @genes.setter
    def genes(self, values: Iterable[int]) -> None:
        self._genes = as_genes(values)

    @property
    def length(self) -> int:
        return int(self._genes.size)

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[int]:
        return (int(g) for g in self._genes)

    def __str__(self) -> str:
        return ",".join(str(g) for g in self)

    def __repr__(self) -> str:
        return f"Chromosome({list(self)!r})"

    def copy(self) -> Chromosome:
        clone = Chromosome(0, rng=self._rng)
        clone._genes = self._genes.copy()
        return clone

    def spawn_with(self, other: Chromosome) -> Chromosome:
        """Breed a child by independent per-gene coin flips.

        The longer parent is dominant (the receiver wins ties) and seeds the
        child, so the child is as long as the longer parent. Each position
        present in both parents takes the other parent's gene with
        probability 0.5; positions only the dominant parent has are kept.
        """
        dominant, recessive = (other, self) if len(other) > len(self) else (self, other)
        child = dominant.copy()
        # The child draws from the receiver's source, whichever parent seeded it
        child._rng = self._rng

        overlap = len(recessive)
        if overlap:
            swap = np.asarray(self.rng.random(overlap)) < 0.5
            child._genes[:overlap] = np.where(swap, recessive._genes, child._genes[:overlap])
        return child

    def diversity_with(self, other: Chromosome) -> float:
        """Fraction of differing bits between the two chromosomes, in [0, 1].

        Positions past the end of the shorter chromosome are compared against
        the complement of the longer one's gene, so every bit there counts as
        different.
        """
        longer, shorter = (
            (self._genes, other._genes) if len(self) > len(other) else (other._genes, self._genes)
        )
        if longer.size == 0:
            raise ValueError("Diversity between two empty chromosomes is undefined")

        extended = np.empty_like(longer)
        extended[: shorter.size] = shorter
        extended[shorter.size :] = np.invert(longer[shorter.size :])

        differing = count_ones(np.bitwise_xor(longer, extended))
        return differing / (longer.size * GENE_BITS)

    def mutate(
        self,
        mutation_probability: float | None = None,
        addition_probability: float | None = None,
        *,
        config: GenomeConfig | None = None,
    ) -> Chromosome:
        """Flip random bits and maybe append a gene, in place.

        A ``mutation_probability`` above 1 buys guaranteed flips: 2.5 means
        two flips plus a third with probability 0.5, and 3.0 means exactly
        three. Flips may land on the same bit and cancel out. At most one
        gene is appended per call. Returns ``self``.
        """
        rates = resolve_config(
            config,
            mutation_probability=mutation_probability,
            addition_probability=addition_probability,
        )
        rng = self.rng

        flips, residual = split_mutation_probability(rates.mutation_probability)
        if residual > 0 and rng.random() < residual:
            flips += 1

        # An empty chromosome has no gene to flip
        if self._genes.size:
            for _ in range(flips):
                idx_gene = int(rng.integers(0, self._genes.size))
                idx_bit = int(rng.integers(0, GENE_BITS))
                self._genes[idx_gene] ^= bit_mask(idx_bit)

        if rng.random() < rates.addition_probability:
            self._genes = np.concatenate([self._genes, random_genes(rng, 1)])

        return self
