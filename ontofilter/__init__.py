# Ontofilter - Axiom selection for ontology graphs
# Copyright (c) 2025 Matt Varendorff
# SPDX-License-Identifier: BSL-1.0

"""Select axioms from ontology graphs with chained --select clauses."""

__version__ = "0.1.0"
