# Ontofilter - Axiom selection for ontology graphs
# Copyright (c) 2025 Matt Varendorff
# SPDX-License-Identifier: BSL-1.0

"""Neo4j constraints and indexes for exported ontology graphs.

Exported graphs use three labels: ``:Entity`` (keyed by IRI or blank node
label), ``:Axiom`` (keyed by a content hash) and ``:Ontology`` (keyed by the
ontology IRI).
"""

import logging

from neo4j import Driver

logger = logging.getLogger(__name__)

UNIQUE_KEYS = {
    "Entity": "id",
    "Axiom": "key",
    "Ontology": "iri",
}

LOOKUP_INDEXES = {
    "Axiom": ("type", "ontology"),
    "Entity": ("kind",),
}


def _constraint_statements() -> list[str]:
    statements = [
        f"CREATE CONSTRAINT {label.lower()}_{key} IF NOT EXISTS "
        f"FOR (n:{label}) REQUIRE n.{key} IS UNIQUE"
        for label, key in UNIQUE_KEYS.items()
    ]
    for label, properties in LOOKUP_INDEXES.items():
        for prop in properties:
            statements.append(
                f"CREATE INDEX {label.lower()}_{prop} IF NOT EXISTS FOR (n:{label}) ON (n.{prop})"
            )
    return statements


SCHEMA_CONSTRAINTS: list[str] = _constraint_statements()

CLEAR_GRAPH = "MATCH (n) DETACH DELETE n"


def apply_schema(driver: Driver) -> None:
    """Create the constraints and indexes, skipping ones that already exist.

    Args:
        driver: Neo4j driver instance.
    """
    with driver.session() as session:
        for statement in SCHEMA_CONSTRAINTS:
            try:
                session.run(statement)
            except Exception as e:
                # Older servers reject IF NOT EXISTS duplicates with an error
                if "already exists" not in str(e).lower():
                    raise
                logger.debug(f"Skipping existing schema item: {statement}")


def clear_graph(driver: Driver) -> None:
    """Delete every node and relationship."""
    with driver.session() as session:
        session.run(CLEAR_GRAPH)
    logger.info("Cleared Neo4j graph")
