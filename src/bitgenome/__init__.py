"""Bitgenome - fixed-width bit genomes and their genetic operators."""

__all__ = ["Chromosome", "Genome", "GenomeConfig"]
__version__ = "0.1.0"


def __getattr__(name: str):
    """Lazy imports: numpy loads only once a genome type is requested."""
    if name == "GenomeConfig":
        from bitgenome.config import GenomeConfig

        return GenomeConfig
    if name == "Chromosome":
        from bitgenome.genetics.chromosome import Chromosome

        return Chromosome
    if name == "Genome":
        from bitgenome.genetics.genome import Genome

        return Genome
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
