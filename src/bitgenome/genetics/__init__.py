"""Genetic representation: 32-bit genes, chromosomes, and genomes."""

from __future__ import annotations

from bitgenome.genetics.chromosome import Chromosome
from bitgenome.genetics.genome import Genome

__all__ = ["Chromosome", "Genome"]
