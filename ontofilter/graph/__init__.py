# Ontofilter - Axiom selection for ontology graphs
# Copyright (c) 2025 Matt Varendorff
# SPDX-License-Identifier: BSL-1.0

"""Ontology graph traversal and Neo4j export.

Note: Neo4j export requires the optional dependency: pip install ontofilter[full]
"""

from .store import OntologyStore


def __getattr__(name: str):
    """Lazy import to avoid requiring neo4j when not needed."""
    if name in ("Neo4jLoader", "axiom_key"):
        from . import loader

        return getattr(loader, name)
    if name in ("SCHEMA_CONSTRAINTS", "apply_schema", "clear_graph"):
        from . import schema

        return getattr(schema, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "Neo4jLoader",
    "OntologyStore",
    "SCHEMA_CONSTRAINTS",
    "apply_schema",
    "axiom_key",
    "clear_graph",
]
