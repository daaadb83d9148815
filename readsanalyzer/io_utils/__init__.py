"""
ReadsAnalyzer v0.1.0

I/O Module for ReadsAnalyzer.

Module structure:
1. io_core.py - Core read structure, read processor interface, FASTQ/FASTA I/O
2. assembly_export.py - Assembly sink and overlap graph export (GFA)
"""

# Core data structures and file I/O
from .io_core import (
    SeqRead,
    RawReadProcessor,
    detect_format,
    read_fastq,
    read_fasta,
    read_sequences,
    write_fasta,
)

# Assembly export functions
from .assembly_export import (
    write_assembly,
    export_overlap_graph_to_gfa,
    validate_gfa_file,
    generate_segment_name,
)

__all__ = [
    "SeqRead",
    "RawReadProcessor",
    "detect_format",
    "read_fastq",
    "read_fasta",
    "read_sequences",
    "write_fasta",
    "write_assembly",
    "export_overlap_graph_to_gfa",
    "validate_gfa_file",
    "generate_segment_name",
]
