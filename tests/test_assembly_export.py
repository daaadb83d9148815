#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ReadsAnalyzer v0.1.0

Tests for the assembly sink and GFA export.

Author: ReadsAnalyzer Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import logging

import pytest

from readsanalyzer.assembly_core import OverlapGraph
from readsanalyzer.io_utils import (
    export_overlap_graph_to_gfa,
    generate_segment_name,
    validate_gfa_file,
    write_assembly,
)


class TestWriteAssembly:
    """Test the best-effort assembly sink."""

    def test_writes_single_line(self, temp_output_dir):
        path = temp_output_dir / "out" / "assembly_out.txt"

        assert write_assembly("AAGTCC", path) is True
        assert path.read_text() == "AAGTCC\n"

    def test_failure_is_logged_not_raised(self, temp_output_dir, caplog):
        """Writing onto a directory fails without raising."""
        with caplog.at_level(logging.ERROR):
            assert write_assembly("AAGTCC", temp_output_dir) is False

        assert "Could not write assembly" in caplog.text

    def test_unencodable_sequence_is_not_raised(self, temp_output_dir):
        assert write_assembly("ACGT\ud800", temp_output_dir / "assembly.txt") is False


class TestGFAExport:
    """Test overlap graph export."""

    def test_segment_names(self):
        assert generate_segment_name(3) == "read-3"

    def test_export(self, temp_output_dir, tiled_reads):
        graph = OverlapGraph(min_overlap=3)
        for read in tiled_reads:
            graph.add_sequence(read)
        graph.add_sequence("TCCGAT")

        path = temp_output_dir / "graph.gfa"
        export_overlap_graph_to_gfa(graph, path)

        lines = path.read_text().splitlines()
        assert lines[0] == "H\tVN:Z:1.0"
        assert "S\tread-1\tTCCGAT\tLN:i:6\tRC:i:2" in lines
        assert "L\tread-3\t+\tread-1\t+\t3M" in lines
        assert "L\tread-1\t+\tread-2\t+\t3M" in lines

        stats = validate_gfa_file(path)
        assert stats == {'segments': 3, 'links': 2, 'version': '1.0'}


class TestGFAValidation:
    """Test link checks on GFA files."""

    def write_gfa(self, directory, *lines):
        path = directory / "graph.gfa"
        path.write_text("\n".join(lines) + "\n")
        return path

    def test_valid_links(self, temp_output_dir):
        path = self.write_gfa(
            temp_output_dir,
            "H\tVN:Z:1.0",
            "L\tread-1\t+\tread-2\t+\t2M",
            "S\tread-1\tAAGT\tLN:i:4",
            "S\tread-2\tGTCC\tLN:i:4",
        )

        assert validate_gfa_file(path) == {'segments': 2, 'links': 1, 'version': '1.0'}

    @pytest.mark.parametrize("link", [
        "L\tread-1\t+\tread-9\t+\t2M",
        "L\tread-1\t-\tread-2\t+\t2M",
        "L\tread-1\t+\tread-2\t+\t2M1I",
        "L\tread-1\t+\tread-2\t+\t5M",
        "L\tread-1\t+\tread-2",
    ])
    def test_invalid_links(self, temp_output_dir, link):
        path = self.write_gfa(
            temp_output_dir,
            "H\tVN:Z:1.0",
            "S\tread-1\tAAGT\tLN:i:4",
            "S\tread-2\tGTCC\tLN:i:4",
            link,
        )

        with pytest.raises(ValueError):
            validate_gfa_file(path)

# ReadsAnalyzer v0.1.0
# Any usage is subject to this software's license.
