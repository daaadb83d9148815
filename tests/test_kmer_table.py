#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ReadsAnalyzer v0.1.0

Tests for the k-mer abundance table.

Author: ReadsAnalyzer Development Team
License: Dual License (Academic/Commercial) - See LICENSE_ACADEMIC.md and LICENSE_COMMERCIAL.md
"""

import pytest
from readsanalyzer.preprocessing import KmersTable
from readsanalyzer.io_utils import SeqRead


class TestKmerExtraction:
    """Test k-mer extraction windowing."""

    def test_window_starts_at_k(self):
        """k=2 on ACGT extracts only GT (start positions 2..2)."""
        table = KmersTable(kmer_size=2)
        table.add_sequence("ACGT")

        assert table.get_distinct_kmers() == {"GT"}
        assert table.get_abundance("GT") == 1

    def test_window_bounds(self):
        """Start positions run from k through len - k inclusive."""
        table = KmersTable(kmer_size=2)
        extracted = table.add_sequence("AACCGGTT")

        assert extracted == 5
        assert table.get_distinct_kmers() == {"CC", "CG", "GG", "GT", "TT"}
        assert table.get_abundance("AA") == 0
        assert table.get_abundance("AC") == 0

    def test_short_read_contributes_nothing(self):
        """Reads shorter than 2k yield no k-mers."""
        table = KmersTable(kmer_size=3)

        assert table.add_sequence("ACGTA") == 0
        assert table.add_sequence("AC") == 0
        assert len(table) == 0

    def test_process_read(self):
        """SeqRead input is counted by its sequence."""
        table = KmersTable(kmer_size=2)
        table.process_read(SeqRead(id="r1", sequence="acgt"))

        assert table.get_abundance("GT") == 1
        assert table.reads_processed == 1

    def test_invalid_kmer_size(self):
        """K-mer size must be a positive integer."""
        with pytest.raises(ValueError):
            KmersTable(kmer_size=0)
        with pytest.raises(ValueError):
            KmersTable(kmer_size=-3)
        with pytest.raises(ValueError):
            KmersTable(kmer_size=True)


class TestKmerAbundance:
    """Test abundance bookkeeping and distribution."""

    def test_abundance_accumulates(self):
        """Repeated k-mers across reads increment the same entry."""
        table = KmersTable(kmer_size=2)
        table.add_sequence("ACGT")
        table.add_sequence("TTGT")

        assert table.get_abundance("GT") == 2

    def test_abundance_sum_matches_extractions(self):
        """Total abundance equals the number of extracted k-mers."""
        table = KmersTable(kmer_size=2)
        reads = ["AAGTCC", "TCCGAT", "GATTACA", "AAGTCC"]
        extracted = sum(table.add_sequence(r) for r in reads)

        assert extracted == 13
        assert sum(table.get_abundance(k) for k in table.get_distinct_kmers()) == extracted

    def test_distribution(self):
        """Index c counts distinct k-mers seen exactly c times."""
        table = KmersTable(kmer_size=2)
        for read in ["AAGTCC", "TCCGAT", "GATTACA", "AAGTCC"]:
            table.add_sequence(read)

        distribution = table.calculate_abundances_distribution()
        assert list(distribution) == [0, 7, 3]
        assert distribution[0] == 0
        assert distribution.sum() == len(table.get_distinct_kmers())

    def test_empty_distribution(self):
        """An empty table yields [0]."""
        table = KmersTable(kmer_size=5)
        assert list(table.calculate_abundances_distribution()) == [0]

# ReadsAnalyzer v0.1.0
# Any usage is subject to this software's license.
