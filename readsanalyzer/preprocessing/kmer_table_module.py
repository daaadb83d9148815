"""
ReadsAnalyzer v0.1.0

K-mer abundance table.

Stores abundance information on the subsequences of a fixed length k
(k-mers) extracted from a stream of reads.

Author: ReadsAnalyzer Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from typing import Dict, Set
from collections import defaultdict
import logging

import numpy as np

from readsanalyzer.config.schema import is_positive_int
from readsanalyzer.io_utils import RawReadProcessor, SeqRead

logger = logging.getLogger(__name__)


class KmersTable(RawReadProcessor):
    """
    Abundance table of fixed-length k-mers.

    K-mers are extracted from start positions ``k`` through ``len(read) - k``
    (both inclusive). Reads shorter than ``2 * k`` contribute nothing.
    """

    def __init__(self, kmer_size: int = 21):
        """
        Initialize k-mer table.

        Args:
            kmer_size: Length of k-mers stored in this table
        """
        if not is_positive_int(kmer_size):
            raise ValueError(f"kmer_size must be a positive integer, got {kmer_size!r}")

        self.kmer_size = kmer_size
        self.kmer_counts: Dict[str, int] = defaultdict(int)
        self.reads_processed = 0

    def process_read(self, read: SeqRead):
        """Identify k-mers in the given read."""
        self.add_sequence(read.sequence)

    def add_sequence(self, sequence: str) -> int:
        """
        Add a sequence to the table.

        Args:
            sequence: DNA sequence to extract k-mers from

        Returns:
            Number of k-mers extracted
        """
        k = self.kmer_size
        extracted = 0
        for i in range(k, len(sequence) - k + 1):
            self.kmer_counts[sequence[i:i + k]] += 1
            extracted += 1

        self.reads_processed += 1
        return extracted

    def get_distinct_kmers(self) -> Set[str]:
        """K-mers observed so far."""
        return set(self.kmer_counts)

    def get_abundance(self, kmer: str) -> int:
        """Times the given k-mer has been extracted (0 if never seen)."""
        return self.kmer_counts.get(kmer, 0)

    def calculate_abundances_distribution(self) -> np.ndarray:
        """
        Calculate the distribution of abundances.

        Returns:
            Array where index ``c`` holds the number of distinct k-mers seen
            exactly ``c`` times. Position zero is always zero.
        """
        counts = np.fromiter(self.kmer_counts.values(), dtype=np.int64,
                             count=len(self.kmer_counts))
        return np.bincount(counts, minlength=1)

    def __len__(self) -> int:
        return len(self.kmer_counts)

    def __repr__(self) -> str:
        return f"KmersTable(kmer_size={self.kmer_size}, distinct_kmers={len(self)})"
