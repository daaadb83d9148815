#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ReadsAnalyzer v0.1.0

Reads analysis driver.

Feeds a stream of reads, one at a time and in arrival order, into the
enabled read processors (k-mer table, overlap graph), then produces the
assembly and persists it to the configured sink.

Author: ReadsAnalyzer Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from readsanalyzer.assembly_core import OverlapGraph, ReadOverlap
from readsanalyzer.io_utils import (
    RawReadProcessor,
    SeqRead,
    read_sequences,
    write_assembly,
    export_overlap_graph_to_gfa,
    validate_gfa_file,
)
from readsanalyzer.preprocessing import KmersTable

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(level: str = 'INFO', log_file: Optional[Union[str, Path]] = None):
    """
    Install root logging handlers.

    Args:
        level: Logging level name
        log_file: Optional file receiving a copy of the log
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, str(level).upper()),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


@dataclass
class AnalysisResult:
    """Summary of one analysis run."""
    reads_processed: int
    distinct_kmers: int
    distinct_sequences: int
    overlaps: int
    layout_length: int
    assembly: str
    assembly_written: bool

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ReadsAnalyzer(RawReadProcessor):
    """
    Driver owning the read processors of one analysis.

    Example:
        >>> analyzer = ReadsAnalyzer(load_config())
        >>> analyzer.process_reads(read_fasta("reads.fa"))
        >>> assembly = analyzer.assemble()
    """

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize the driver from a configuration dictionary.

        Args:
            config: Configuration as produced by ``load_config``
        """
        self.config = config

        self.kmers_table: Optional[KmersTable] = None
        if config['kmers'].get('enabled', True):
            self.kmers_table = KmersTable(config['kmers']['kmer_size'])

        self.overlap_graph: Optional[OverlapGraph] = None
        if config['overlap_graph'].get('enabled', True):
            self.overlap_graph = OverlapGraph(config['overlap_graph']['min_overlap'])

        self.reads_processed = 0
        self.assembly_written = False

    @property
    def processors(self) -> List[RawReadProcessor]:
        return [p for p in (self.kmers_table, self.overlap_graph) if p is not None]

    def process_read(self, read: SeqRead):
        """Feed one read to every enabled processor."""
        for processor in self.processors:
            processor.process_read(read)
        self.reads_processed += 1

    def process_reads(self, reads: Iterable[SeqRead]) -> int:
        """
        Feed a stream of reads, in order.

        Returns:
            Number of reads processed by this call
        """
        count = super().process_reads(reads)
        logger.info(f"Processed {count:,} reads")
        return count

    def process_file(self, reads_file: Union[str, Path]) -> int:
        """Read and process every read of a FASTQ/FASTA file."""
        input_config = self.config.get('input', {})
        logger.info(f"Loading reads from {reads_file}")
        reads = read_sequences(
            reads_file,
            fmt=input_config.get('format', 'auto'),
            min_length=input_config.get('min_length', 0),
        )
        return self.process_reads(reads)

    def _require_graph(self) -> OverlapGraph:
        if self.overlap_graph is None:
            raise RuntimeError("Overlap graph is disabled in the configuration")
        return self.overlap_graph

    def assemble(self, output_path: Optional[Union[str, Path]] = None,
                 layout: Optional[List[ReadOverlap]] = None) -> str:
        """
        Compute the assembly and persist it to the sink.

        The sink write is best effort; the computed assembly is returned
        whether or not it could be written.

        Args:
            output_path: Sink location (default: output.assembly_path)
            layout: Precomputed layout path, reused instead of walking the graph again

        Returns:
            Assembled sequence
        """
        graph = self._require_graph()
        assembly = graph.get_assembly(layout)
        logger.info(f"Assembled {len(assembly):,} bp from {len(graph):,} distinct reads")

        if output_path is None:
            output_path = self.config.get('output', {}).get('assembly_path')

        self.assembly_written = False
        if output_path:
            self.assembly_written = write_assembly(assembly, output_path)

        return assembly

    def export_gfa(self, gfa_path: Union[str, Path]) -> Dict[str, Any]:
        """Export the overlap graph to GFA and check the written file."""
        export_overlap_graph_to_gfa(self._require_graph(), gfa_path)
        stats = validate_gfa_file(gfa_path)
        logger.debug(f"GFA check passed: {stats}")
        return stats

    def run(self, reads_file: Union[str, Path]) -> AnalysisResult:
        """
        Process a read file end to end.

        Returns:
            AnalysisResult summarizing the run
        """
        self.process_file(reads_file)

        assembly = ""
        layout_length = 0
        if self.overlap_graph is not None:
            layout = self.overlap_graph.get_layout_path()
            layout_length = len(layout)
            assembly = self.assemble(layout=layout)

            gfa_path = self.config.get('output', {}).get('gfa_path')
            if gfa_path:
                self.export_gfa(gfa_path)

        return AnalysisResult(
            reads_processed=self.reads_processed,
            distinct_kmers=len(self.kmers_table) if self.kmers_table is not None else 0,
            distinct_sequences=len(self.overlap_graph) if self.overlap_graph is not None else 0,
            overlaps=self.overlap_graph.num_overlaps if self.overlap_graph is not None else 0,
            layout_length=layout_length,
            assembly=assembly,
            assembly_written=self.assembly_written,
        )

# ReadsAnalyzer v0.1.0
# Any usage is subject to this software's license.
