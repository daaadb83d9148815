#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Preprocessing Module for ReadsAnalyzer.

Main Components:
    - KmersTable: k-mer abundance counting over a stream of reads
"""

from .kmer_table_module import KmersTable

__all__ = ["KmersTable"]
