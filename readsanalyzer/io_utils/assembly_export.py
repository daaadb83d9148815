#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ReadsAnalyzer v0.1.0

Assembly Export: assembly text sink and overlap graph GFA export.

Author: ReadsAnalyzer Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

from __future__ import annotations
import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING
from dataclasses import dataclass

if TYPE_CHECKING:
    from readsanalyzer.assembly_core import OverlapGraph

logger = logging.getLogger(__name__)


# ============================================================================
#                           ASSEMBLY SINK
# ============================================================================

def write_assembly(sequence: str, output_path: str | Path) -> bool:
    """
    Write an assembled sequence as a single line of plain text.

    The write is best effort: I/O failures are logged and swallowed so that
    an unavailable sink never aborts the caller.

    Args:
        sequence: Assembled sequence
        output_path: Destination file

    Returns:
        True if the sequence was written
    """
    output_path = Path(output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(sequence + '\n')
    except (OSError, UnicodeError) as e:
        logger.error(f"Could not write assembly to {output_path}: {e}")
        return False

    logger.info(f"Wrote assembly ({len(sequence):,} bp) to {output_path}")
    return True


# ============================================================================
#                       GFA EXPORT FUNCTIONS
# ============================================================================

@dataclass
class GFASegment:
    """Represents a GFA S-line (segment)."""
    name: str
    sequence: str
    abundance: int

    def to_gfa_line(self) -> str:
        """
        Convert to GFA S-line format.

        Format: S <name> <sequence> LN:i:<length> RC:i:<abundance>
        """
        return f"S\t{self.name}\t{self.sequence or '*'}\tLN:i:{len(self.sequence)}\tRC:i:{self.abundance}"


@dataclass
class GFALink:
    """Represents a GFA L-line (link/edge)."""
    from_name: str
    to_name: str
    overlap: int

    def to_gfa_line(self) -> str:
        """
        Convert to GFA L-line format.

        Format: L <from> + <to> + <overlap>M
        """
        return f"L\t{self.from_name}\t+\t{self.to_name}\t+\t{self.overlap}M"


def generate_segment_name(index: int) -> str:
    """
    Generate a segment name from the insertion index of a sequence.

    Example:
        >>> generate_segment_name(1)
        'read-1'
    """
    return f"read-{index}"


def export_overlap_graph_to_gfa(graph: OverlapGraph, output_path: str | Path) -> None:
    """
    Export an overlap graph to GFA v1.

    Every distinct sequence becomes an S line, named by insertion order and
    tagged with its abundance; every overlap becomes an L line whose CIGAR
    is the exact-match overlap length.

    Args:
        graph: Overlap graph to export
        output_path: Path to output GFA file
    """
    output_path = Path(output_path)
    logger.info(f"Exporting overlap graph to GFA: {output_path}")

    names: dict[str, str] = {}
    segments: list[GFASegment] = []
    for index, (sequence, count) in enumerate(graph.read_counts.items(), start=1):
        names[sequence] = generate_segment_name(index)
        segments.append(GFASegment(names[sequence], sequence, count))

    links = [
        GFALink(names[edge.source_sequence], names[edge.dest_sequence], edge.overlap)
        for edge in graph.iter_overlaps()
    ]

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write("H\tVN:Z:1.0\n")
        for segment in segments:
            f.write(segment.to_gfa_line() + '\n')
        for link in links:
            f.write(link.to_gfa_line() + '\n')

    logger.info(f"Wrote GFA with {len(segments)} segments and {len(links)} links")


_OVERLAP_CIGAR = re.compile(r'^(\d+)M$')


def validate_gfa_file(gfa_path: str | Path) -> dict:
    """
    Check an overlap graph GFA file and return basic statistics.

    Every L line must join two declared segments on the forward strand,
    with an exact-match CIGAR (``<n>M``) no longer than either segment.

    Args:
        gfa_path: Path to GFA file

    Returns:
        Dict with keys: 'segments', 'links', 'version'

    Raises:
        ValueError: On a malformed S or L line
    """
    gfa_path = Path(gfa_path)
    stats = {
        'segments': 0,
        'links': 0,
        'version': None
    }
    lengths: dict[str, int] = {}
    links: list[tuple[int, list[str]]] = []

    with open(gfa_path, 'r', encoding='utf-8') as f:
        for line_number, line in enumerate(f, start=1):
            fields = line.rstrip('\n').split('\t')
            record = fields[0]

            if record == 'H':
                for tag in fields[1:]:
                    if tag.startswith('VN:Z:'):
                        stats['version'] = tag[len('VN:Z:'):]
            elif record == 'S':
                if len(fields) < 3:
                    raise ValueError(f"{gfa_path}:{line_number}: truncated segment line")
                sequence = fields[2]
                lengths[fields[1]] = 0 if sequence == '*' else len(sequence)
                stats['segments'] += 1
            elif record == 'L':
                if len(fields) < 6:
                    raise ValueError(f"{gfa_path}:{line_number}: truncated link line")
                links.append((line_number, fields))

    # Links may precede the segments they reference
    for line_number, fields in links:
        from_name, from_orient, to_name, to_orient, cigar = fields[1:6]
        for name in (from_name, to_name):
            if name not in lengths:
                raise ValueError(f"{gfa_path}:{line_number}: unknown segment {name!r}")
        if from_orient != '+' or to_orient != '+':
            raise ValueError(f"{gfa_path}:{line_number}: unexpected orientation")

        match = _OVERLAP_CIGAR.match(cigar)
        if match is None:
            raise ValueError(f"{gfa_path}:{line_number}: invalid overlap CIGAR {cigar!r}")
        overlap = int(match.group(1))
        if overlap > min(lengths[from_name], lengths[to_name]):
            raise ValueError(
                f"{gfa_path}:{line_number}: overlap {overlap} exceeds segment length"
            )
        stats['links'] += 1

    return stats

# ReadsAnalyzer v0.1.0
# Any usage is subject to this software's license.
