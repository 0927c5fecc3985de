# Ontofilter - Axiom selection for ontology graphs
# Copyright (c) 2025 Matt Varendorff
# SPDX-License-Identifier: BSL-1.0

"""HTTP service for ontology filtering.

Note: Requires optional dependency: pip install ontofilter[full]
"""
