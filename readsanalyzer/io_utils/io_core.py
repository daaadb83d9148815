#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Core I/O module for ReadsAnalyzer.

Consolidated module containing:
- Core read data structure (SeqRead)
- The read processor interface shared by every read consumer
- FASTQ/FASTA file reading and FASTA writing

Reads are parsed lazily so that consumers can process a stream of reads
one at a time, in arrival order.
"""

# =============================================================================
# SECTION 1: IMPORTS AND DEPENDENCIES
# =============================================================================

import gzip
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Optional, TextIO, Union

from Bio import SeqIO

logger = logging.getLogger(__name__)

FASTQ_EXTENSIONS = ('.fq', '.fastq')
FASTA_EXTENSIONS = ('.fa', '.fasta', '.fna')


# =============================================================================
# SECTION 2: CORE READ DATA STRUCTURES
# =============================================================================

@dataclass
class SeqRead:
    """
    Sequencing read with metadata.

    Attributes:
        id: Read identifier
        sequence: DNA sequence
        quality: Quality scores (Phred+33 encoding)
        metadata: Additional metadata
    """
    id: str
    sequence: str
    quality: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # Ensure sequence is uppercase
        self.sequence = self.sequence.upper()

    @property
    def length(self) -> int:
        """Get read length."""
        return len(self.sequence)

    def get_average_quality(self) -> Optional[float]:
        """Mean Phred quality, or None for reads without qualities."""
        if not self.quality:
            return None
        return sum(ord(c) - 33 for c in self.quality) / len(self.quality)

    def to_fasta_string(self) -> str:
        """Format read as a single-line FASTA record."""
        return f">{self.id}\n{self.sequence}\n"

    def __repr__(self) -> str:
        return f"SeqRead(id={self.id!r}, length={self.length})"

    def __len__(self) -> int:
        return len(self.sequence)


class RawReadProcessor(ABC):
    """
    Consumer of a stream of reads.

    A driver calls ``process_read`` once per read, in arrival order. Each
    call must complete before the next one starts.
    """

    @abstractmethod
    def process_read(self, read: SeqRead) -> None:
        """Incorporate one read into the processor state."""
        ...

    def process_reads(self, reads: Iterable[SeqRead]) -> int:
        """
        Feed every read of an iterable to ``process_read``.

        Returns:
            Number of reads processed
        """
        count = 0
        for read in reads:
            self.process_read(read)
            count += 1
        return count


# =============================================================================
# SECTION 3: FILE HANDLING HELPERS
# =============================================================================

def is_gzipped(filepath: Union[str, Path]) -> bool:
    """
    Check if file is gzip compressed.

    Args:
        filepath: Path to file

    Returns:
        True if file is gzipped
    """
    return Path(filepath).suffix in ('.gz', '.gzip')


def open_file(filepath: Union[str, Path], mode: str = 'r') -> TextIO:
    """
    Open file with automatic gzip detection.

    Args:
        filepath: Path to file
        mode: File mode ('r' or 'w')

    Returns:
        File handle
    """
    filepath = Path(filepath)

    if is_gzipped(filepath):
        if 'r' in mode:
            return gzip.open(filepath, 'rt')
        else:
            return gzip.open(filepath, 'wt')
    else:
        return open(filepath, mode)


def detect_format(filepath: Union[str, Path]) -> str:
    """
    Infer the read file format from its extension.

    Args:
        filepath: Path to a FASTQ or FASTA file (optionally gzipped)

    Returns:
        'fastq' or 'fasta'

    Raises:
        ValueError: If the extension is not recognized
    """
    filepath = Path(filepath)
    suffixes = [s.lower() for s in filepath.suffixes]
    if suffixes and suffixes[-1] in ('.gz', '.gzip'):
        suffixes = suffixes[:-1]

    ext = suffixes[-1] if suffixes else ''
    if ext in FASTQ_EXTENSIONS:
        return 'fastq'
    if ext in FASTA_EXTENSIONS:
        return 'fasta'
    raise ValueError(f"Cannot infer read format from file name: {filepath.name}")


# =============================================================================
# SECTION 4: FASTQ / FASTA INPUT
# =============================================================================

def _parse_records(filepath: Union[str, Path], fmt: str, min_length: int) -> Iterator[SeqRead]:
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"{fmt.upper()} file not found: {filepath}")

    with open_file(filepath, 'r') as handle:
        for record in SeqIO.parse(handle, fmt):
            sequence = str(record.seq)
            if len(sequence) < min_length:
                continue

            quality = None
            if fmt == 'fastq':
                phred = record.letter_annotations.get("phred_quality", [])
                quality = "".join(chr(q + 33) for q in phred) or None

            yield SeqRead(
                id=record.id,
                sequence=sequence,
                quality=quality,
                metadata={'description': record.description}
            )


def read_fastq(filepath: Union[str, Path], min_length: int = 0) -> Iterator[SeqRead]:
    """
    Read FASTQ file and yield SeqRead objects.

    Args:
        filepath: Path to FASTQ file (can be gzipped)
        min_length: Minimum read length filter

    Yields:
        SeqRead objects

    Examples:
        >>> for read in read_fastq("reads.fq"):
        ...     print(read.id, read.length)
    """
    return _parse_records(filepath, 'fastq', min_length)


def read_fasta(filepath: Union[str, Path], min_length: int = 0) -> Iterator[SeqRead]:
    """
    Read FASTA file and yield SeqRead objects (without quality scores).
    """
    return _parse_records(filepath, 'fasta', min_length)


def read_sequences(
    filepath: Union[str, Path],
    fmt: str = 'auto',
    min_length: int = 0
) -> Iterator[SeqRead]:
    """
    Read a FASTQ or FASTA file.

    Args:
        filepath: Path to the read file
        fmt: 'fastq', 'fasta' or 'auto' (infer from extension)
        min_length: Minimum read length filter

    Returns:
        Iterator of SeqRead objects
    """
    if fmt == 'auto':
        fmt = detect_format(filepath)

    if fmt == 'fastq':
        return read_fastq(filepath, min_length=min_length)
    elif fmt == 'fasta':
        return read_fasta(filepath, min_length=min_length)
    raise ValueError(f"Unsupported read format: {fmt}")


# =============================================================================
# SECTION 5: FASTA OUTPUT
# =============================================================================

def write_fasta(
    reads: Iterable[SeqRead],
    filepath: Union[str, Path],
    line_width: int = 80
) -> int:
    """
    Write SeqRead objects to FASTA file.

    Args:
        reads: Iterable of SeqRead objects
        filepath: Output FASTA file path
        line_width: Number of bases per line (0 = no wrapping)

    Returns:
        Number of sequences written
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with open_file(filepath, 'w') as handle:
        for read in reads:
            handle.write(f">{read.id}\n")

            if line_width > 0:
                for i in range(0, len(read.sequence), line_width):
                    handle.write(read.sequence[i:i + line_width] + '\n')
            else:
                handle.write(read.sequence + '\n')

            count += 1

    logger.debug(f"Wrote {count} sequences to {filepath}")
    return count
