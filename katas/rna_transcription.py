"""Transcription of DNA strands to RNA."""

_RNA_TABLE = {"G": "C", "C": "G", "T": "A", "A": "U"}


def to_rna(dna: str) -> str:
    """Return the RNA complement of dna; unknown nucleotides are dropped."""
    return "".join(_RNA_TABLE.get(nucleotide, "") for nucleotide in dna)