#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ReadsAnalyzer v0.1.0

Tests for read structures and FASTQ/FASTA I/O.

Author: ReadsAnalyzer Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import gzip

import pytest
from readsanalyzer.io_utils import (
    SeqRead,
    detect_format,
    read_fasta,
    read_fastq,
    read_sequences,
    write_fasta,
)


class TestSeqRead:
    """Test the read data structure."""

    def test_sequence_is_uppercased(self):
        read = SeqRead(id="r1", sequence="acgt")
        assert read.sequence == "ACGT"
        assert len(read) == 4
        assert read.length == 4

    def test_average_quality(self):
        read = SeqRead(id="r1", sequence="ACGT", quality="IIII")
        assert read.get_average_quality() == 40.0
        assert SeqRead(id="r2", sequence="ACGT").get_average_quality() is None


class TestFormatDetection:
    """Test file format inference."""

    @pytest.mark.parametrize("name,expected", [
        ("reads.fq", "fastq"),
        ("reads.fastq.gz", "fastq"),
        ("reads.fa", "fasta"),
        ("reads.FASTA", "fasta"),
        ("reads.fna.gz", "fasta"),
    ])
    def test_known_extensions(self, name, expected):
        assert detect_format(name) == expected

    def test_unknown_extension(self):
        with pytest.raises(ValueError):
            detect_format("reads.bam")


class TestReadParsing:
    """Test FASTQ/FASTA parsing."""

    def test_read_fasta(self, simple_fasta):
        reads = list(read_fasta(simple_fasta))

        assert [r.id for r in reads] == ["r1", "r2", "r3", "r4"]
        assert reads[2].sequence == "GATTACA"
        assert reads[0].quality is None

    def test_read_fastq(self, simple_fastq):
        reads = list(read_fastq(simple_fastq))

        assert len(reads) == 2
        assert reads[0].sequence == "AAGTCCGA"
        assert reads[0].quality == "IIIIIIII"

    def test_min_length_filter(self, simple_fasta):
        reads = list(read_fasta(simple_fasta, min_length=7))
        assert [r.id for r in reads] == ["r3"]

    def test_gzipped_input(self, temp_output_dir):
        path = temp_output_dir / "reads.fa.gz"
        with gzip.open(path, 'wt') as f:
            f.write(">g1\nACGTACGT\n")

        reads = list(read_sequences(path))
        assert reads[0].sequence == "ACGTACGT"

    def test_read_sequences_dispatch(self, simple_fastq):
        reads = list(read_sequences(simple_fastq, fmt='auto'))
        assert len(reads) == 2

    def test_missing_file(self, temp_output_dir):
        with pytest.raises(FileNotFoundError):
            list(read_fasta(temp_output_dir / "missing.fa"))

    def test_unsupported_format(self, simple_fasta):
        with pytest.raises(ValueError):
            read_sequences(simple_fasta, fmt='sam')


class TestFastaOutput:
    """Test FASTA writing."""

    def test_write_fasta_wraps_lines(self, temp_output_dir):
        path = temp_output_dir / "nested" / "out.fa"
        count = write_fasta([SeqRead(id="c1", sequence="ACGTACGTAC")], path, line_width=4)

        assert count == 1
        assert path.read_text() == ">c1\nACGT\nACGT\nAC\n"

    def test_write_then_read(self, temp_output_dir):
        path = temp_output_dir / "out.fa"
        write_fasta([SeqRead(id="c1", sequence="ACGT"), SeqRead(id="c2", sequence="GGCC")], path)

        assert [r.sequence for r in read_fasta(path)] == ["ACGT", "GGCC"]

# ReadsAnalyzer v0.1.0
# Any usage is subject to this software's license.
