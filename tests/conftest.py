#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ReadsAnalyzer v0.1.0

Pytest configuration and shared fixtures.

Author: ReadsAnalyzer Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest
from pathlib import Path
import tempfile
import shutil

from readsanalyzer.config import load_config


@pytest.fixture
def temp_output_dir():
    """Create temporary output directory for tests."""
    temp_dir = tempfile.mkdtemp(prefix="readsanalyzer_test_")
    yield Path(temp_dir)
    # Cleanup after test
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def tiled_reads():
    """Reads tiling AAGTCCGATTACA with 3bp overlaps, in shuffled order."""
    return ["TCCGAT", "GATTACA", "AAGTCC"]


@pytest.fixture
def simple_fasta(temp_output_dir):
    """Write a small FASTA file of overlapping reads."""
    path = temp_output_dir / "reads.fasta"
    path.write_text(
        ">r1\nAAGTCC\n"
        ">r2\nTCCGAT\n"
        ">r3\nGATTACA\n"
        ">r4\nAAGTCC\n"
    )
    return path


@pytest.fixture
def simple_fastq(temp_output_dir):
    """Write a small FASTQ file of overlapping reads."""
    path = temp_output_dir / "reads.fastq"
    path.write_text(
        "@read1\nAAGTCCGA\n+\nIIIIIIII\n"
        "@read2\nCCGATTAC\n+\nIIIIIIII\n"
    )
    return path


@pytest.fixture
def analysis_config(temp_output_dir):
    """Default configuration with small parameters and a temporary sink."""
    config = load_config()
    config['kmers']['kmer_size'] = 2
    config['overlap_graph']['min_overlap'] = 3
    config['output']['assembly_path'] = str(temp_output_dir / "out" / "assembly_out.txt")
    return config

# ReadsAnalyzer v0.1.0
# Any usage is subject to this software's license.
