"""Unsigned 32-bit gene helpers.

Genes are stored as ``numpy.uint32`` so XOR, complement and shifts wrap
modulo 2**32 without sign extension.
"""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from bitgenome.genetics.rng import RandomSource

GENE_BITS = 32
GENE_MASK = 0xFFFFFFFF
GENE_DTYPE = np.uint32


def to_gene(value: int) -> int:
    """Wrap any integer onto the unsigned 32-bit range."""
    return int(value) & GENE_MASK


def as_genes(values: Iterable[int]) -> np.ndarray:
    return np.fromiter((to_gene(v) for v in values), dtype=GENE_DTYPE)


def random_genes(rng: RandomSource, count: int) -> np.ndarray:
    """Draw ``count`` genes uniformly from [0, 2**32 - 1]."""
    if count == 0:
        return np.empty(0, dtype=GENE_DTYPE)
    drawn = rng.integers(0, GENE_MASK, size=count, dtype=GENE_DTYPE, endpoint=True)
    return np.asarray(drawn, dtype=GENE_DTYPE)


def count_ones(genes: np.ndarray) -> int:
    """Total number of set bits across a gene array."""
    packed = np.ascontiguousarray(genes, dtype=GENE_DTYPE)
    return int(np.unpackbits(packed.view(np.uint8)).sum())


def bit_mask(bit: int) -> np.uint32:
    if not 0 <= bit < GENE_BITS:
        raise ValueError(f"bit must be in [0, {GENE_BITS}), got {bit}")
    return GENE_DTYPE(1 << bit)


def split_mutation_probability(probability: float) -> tuple[int, float]:
    """Split a mutation probability into guaranteed flips and a residual chance.

    2.5 -> (2, 0.5): two flips always, a third with probability 0.5.
    3.0 -> (3, 0.0): exactly three flips.
    0.2 -> (0, 0.2): a single flip with probability 0.2.
    """
    if probability < 1.0:
        return 0, probability
    guaranteed = math.floor(probability)
    return guaranteed, probability - guaranteed
