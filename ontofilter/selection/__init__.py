# Ontofilter - Axiom selection for ontology graphs
# Copyright (c) 2025 Matt Varendorff
# SPDX-License-Identifier: BSL-1.0

"""Select clause parsing, entity selection, axiom filters and the filter pipeline."""

from .filters import filter_anonymous, filter_axioms, filter_complement, merge
from .parser import (
    DEFAULT_CLAUSE,
    SelectClause,
    parse_annotation,
    parse_axiom_type,
    parse_select,
    parse_selects,
    resolve_axiom_types,
)
from .pipeline import FilterOptions, FilterPipeline, read_term_file, run_filter
from .selector import EntitySelector

__all__ = [
    "DEFAULT_CLAUSE",
    "EntitySelector",
    "FilterOptions",
    "FilterPipeline",
    "SelectClause",
    "filter_anonymous",
    "filter_axioms",
    "filter_complement",
    "merge",
    "parse_annotation",
    "parse_axiom_type",
    "parse_select",
    "parse_selects",
    "read_term_file",
    "resolve_axiom_types",
    "run_filter",
]
