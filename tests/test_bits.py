"""Tests for 32-bit gene helpers."""

import numpy as np
import pytest

from bitgenome.genetics.bits import (
    GENE_DTYPE,
    GENE_MASK,
    as_genes,
    bit_mask,
    count_ones,
    random_genes,
    split_mutation_probability,
    to_gene,
)


def test_to_gene_wraps_modulo_2_32():
    assert to_gene(0) == 0
    assert to_gene(GENE_MASK) == GENE_MASK
    assert to_gene(GENE_MASK + 1) == 0
    assert to_gene(-1) == GENE_MASK
    assert to_gene(1 << 40 | 7) == 7


def test_as_genes_builds_uint32_array():
    genes = as_genes([1, -1, 2**32 + 5])
    assert genes.dtype == GENE_DTYPE
    assert genes.tolist() == [1, GENE_MASK, 5]


def test_as_genes_empty():
    genes = as_genes([])
    assert genes.dtype == GENE_DTYPE
    assert genes.size == 0


def test_count_ones():
    assert count_ones(as_genes([])) == 0
    assert count_ones(as_genes([0, 0])) == 0
    assert count_ones(as_genes([GENE_MASK])) == 32
    assert count_ones(as_genes([0b1011, 1 << 31, GENE_MASK])) == 3 + 1 + 32


def test_count_ones_on_slices():
    genes = as_genes([GENE_MASK, 0, GENE_MASK, 0])
    assert count_ones(genes[::2]) == 64


def test_bit_mask():
    assert int(bit_mask(0)) == 1
    assert int(bit_mask(31)) == 2**31
    assert bit_mask(31).dtype == GENE_DTYPE


@pytest.mark.parametrize("bit", [-1, 32])
def test_bit_mask_rejects_out_of_range(bit):
    with pytest.raises(ValueError):
        bit_mask(bit)


def test_high_bit_flip_has_no_sign_artifacts():
    genes = as_genes([0])
    genes[0] ^= bit_mask(31)
    assert int(genes[0]) == 2**31
    assert int(np.invert(genes)[0]) == 2**31 - 1


def test_random_genes_in_range(rng):
    genes = random_genes(rng, 1000)
    assert genes.dtype == GENE_DTYPE
    assert genes.size == 1000
    assert int(genes.min()) >= 0
    assert int(genes.max()) <= GENE_MASK


def test_random_genes_zero_count(scripted):
    assert random_genes(scripted, 0).size == 0
    assert scripted.int_calls == 0


@pytest.mark.parametrize(
    "probability, expected",
    [
        (0.0, (0, 0.0)),
        (0.2, (0, 0.2)),
        (1.0, (1, 0.0)),
        (3.0, (3, 0.0)),
    ],
)
def test_split_mutation_probability(probability, expected):
    assert split_mutation_probability(probability) == expected


def test_split_mutation_probability_fraction():
    flips, residual = split_mutation_probability(2.5)
    assert flips == 2
    assert residual == pytest.approx(0.5)
