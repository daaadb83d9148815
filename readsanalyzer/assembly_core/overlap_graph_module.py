"""
ReadsAnalyzer v0.1.0

Overlap graph for assembling a sequence from a stream of short reads.

This module implements an online overlap-layout-consensus (OLC) approach.
Each distinct read becomes a node; a directed edge A -> B records the
longest suffix of A that equals a prefix of B. Edges are computed once,
when the later of the two reads is first seen, and are never revisited.

Key Features:
- Incremental construction (one read at a time, in arrival order)
- Exact suffix/prefix overlap detection
- Minimum in-degree source selection
- Greedy layout with dead-end termination
- Stitching of the layout into a single assembled sequence

Author: ReadsAnalyzer Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from typing import List, Dict, Set, Iterator, Optional
from dataclasses import dataclass
from collections import Counter
import logging

import numpy as np

from readsanalyzer.config.schema import is_positive_int
from readsanalyzer.io_utils import RawReadProcessor, SeqRead

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReadOverlap:
    """
    Represents an overlap between two reads.

    Overlap notation: source overlaps dest
    source: --------------->
    dest:         ---------------->
                  <-overlap->
    """
    source_sequence: str
    dest_sequence: str
    overlap: int

    def __str__(self) -> str:
        return f"{self.source_sequence} -> {self.dest_sequence} ({self.overlap}bp)"


def get_overlap_length(sequence1: str, sequence2: str) -> int:
    """
    Length of the longest suffix of ``sequence1`` equal to a prefix of ``sequence2``.

    Candidate lengths run from 1 to ``min(len(sequence1), len(sequence2))``,
    so a sequence fully contained at the end of the other counts as an
    overlap of its whole length.

    Args:
        sequence1: Sequence to evaluate suffixes
        sequence2: Sequence to evaluate prefixes

    Returns:
        Largest matching length, or 0 if no suffix matches any prefix

    Example:
        >>> get_overlap_length("AAGT", "GTCC")
        2
    """
    for length in range(min(len(sequence1), len(sequence2)), 0, -1):
        if sequence1.endswith(sequence2[:length]):
            return length
    return 0


class OverlapGraph(RawReadProcessor):
    """
    Overlap graph for a set of reads taken from a sequence to assemble.

    Nodes = distinct read sequences
    Edges = suffix/prefix overlaps of at least ``min_overlap`` bases

    Both maps are keyed by sequence and share insertion order, which is
    also the order used to break ties in source selection and layout.
    """

    def __init__(self, min_overlap: int = 20):
        """
        Initialize empty overlap graph.

        Args:
            min_overlap: Minimum overlap length for an edge to be recorded
        """
        if not is_positive_int(min_overlap):
            raise ValueError(f"min_overlap must be a positive integer, got {min_overlap!r}")

        self.min_overlap = min_overlap

        # sequence -> number of times ingested
        self.read_counts: Dict[str, int] = {}
        # sequence -> outgoing overlaps
        self.overlaps: Dict[str, List[ReadOverlap]] = {}

        self.num_overlaps = 0

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def process_read(self, read: SeqRead):
        """Add a new read to the overlap graph."""
        self.add_sequence(read.sequence)

    def add_sequence(self, sequence: str) -> bool:
        """
        Add a sequence to the graph.

        Repeated sequences only bump their count. A new sequence is compared
        against every sequence already present, in insertion order, in both
        directions.

        Args:
            sequence: Read sequence

        Returns:
            True if the sequence was new to the graph
        """
        if sequence in self.read_counts:
            self.read_counts[sequence] += 1
            return False

        self.read_counts[sequence] = 1

        successors: List[ReadOverlap] = []
        predecessors = 0
        for existing, existing_overlaps in self.overlaps.items():
            length = get_overlap_length(sequence, existing)
            if length >= self.min_overlap:
                successors.append(ReadOverlap(sequence, existing, length))

            length = get_overlap_length(existing, sequence)
            if length >= self.min_overlap:
                existing_overlaps.append(ReadOverlap(existing, sequence, length))
                predecessors += 1

        self.overlaps[sequence] = successors
        self.num_overlaps += len(successors) + predecessors

        logger.debug(
            f"Added sequence #{len(self.read_counts)}: "
            f"{len(successors)} successors, {predecessors} predecessors"
        )
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_distinct_sequences(self) -> Set[str]:
        """Sequences that have been added to this graph."""
        return set(self.read_counts)

    def get_sequence_abundance(self, sequence: str) -> int:
        """Times the given sequence has been added to this graph (0 if never)."""
        return self.read_counts.get(sequence, 0)

    def get_outgoing(self, sequence: str) -> List[ReadOverlap]:
        """Get all outgoing overlaps from a sequence."""
        return list(self.overlaps.get(sequence, []))

    def iter_overlaps(self) -> Iterator[ReadOverlap]:
        """Iterate over every edge, grouped by source in insertion order."""
        for edges in self.overlaps.values():
            yield from edges

    def calculate_abundances_distribution(self) -> np.ndarray:
        """
        Calculate the distribution of abundances.

        Returns:
            Array where index ``c`` holds the number of distinct sequences
            added exactly ``c`` times. Position zero is always zero.
        """
        counts = np.fromiter(self.read_counts.values(), dtype=np.int64,
                             count=len(self.read_counts))
        return np.bincount(counts, minlength=1)

    def calculate_overlap_distribution(self) -> np.ndarray:
        """
        Calculate the distribution of number of successors.

        Returns:
            Array where index ``d`` holds the number of sequences with
            exactly ``d`` outgoing overlaps.
        """
        degrees = np.fromiter((len(edges) for edges in self.overlaps.values()),
                              dtype=np.int64, count=len(self.overlaps))
        return np.bincount(degrees, minlength=1)

    # ------------------------------------------------------------------
    # Layout and assembly
    # ------------------------------------------------------------------

    def _in_degrees(self) -> Counter:
        return Counter(edge.dest_sequence for edge in self.iter_overlaps())

    def get_source_sequence(self) -> str:
        """
        Predict the leftmost sequence of the final assembly.

        Returns the sequence with the smallest in-degree; among ties, the
        one added first. An empty graph yields the empty sequence.
        """
        if not self.overlaps:
            return ""

        in_degree = self._in_degrees()
        return min(self.overlaps, key=lambda sequence: in_degree[sequence])

    def get_layout_path(self) -> List[ReadOverlap]:
        """
        Calculate a greedy layout path for this overlap graph.

        Starts from the source sequence, seeded with a zero-length overlap
        from the empty sequence. At each step the unvisited successor with
        the largest overlap is chosen (first in edge order among ties).
        Stops at the first sequence without unvisited successors.

        Returns:
            List of adjacent overlaps. The destination of the overlap in
            position i is the source of the overlap in position i+1.
        """
        current = self.get_source_sequence()
        visited = {current}
        layout = [ReadOverlap("", current, 0)]

        while True:
            best: Optional[ReadOverlap] = None
            for edge in self.overlaps.get(current, []):
                if edge.dest_sequence in visited:
                    continue
                if best is None or edge.overlap > best.overlap:
                    best = edge

            if best is None:
                break  # Dead end

            current = best.dest_sequence
            visited.add(current)
            layout.append(best)

        logger.debug(f"Layout path visits {len(layout)} of {len(self.overlaps)} sequences")
        return layout

    def get_assembly(self, layout: Optional[List[ReadOverlap]] = None) -> str:
        """
        Predict an assembly consistent with this overlap graph.

        Appends, for every overlap in the layout path, the part of the
        destination sequence to the right of the overlap.

        Args:
            layout: Precomputed result of get_layout_path() (optional)
        """
        if layout is None:
            layout = self.get_layout_path()
        return "".join(edge.dest_sequence[edge.overlap:] for edge in layout)

    def __len__(self) -> int:
        return len(self.read_counts)

    def __contains__(self, sequence: str) -> bool:
        return sequence in self.read_counts

    def __repr__(self) -> str:
        return (f"OverlapGraph(min_overlap={self.min_overlap}, "
                f"sequences={len(self)}, overlaps={self.num_overlaps})")
