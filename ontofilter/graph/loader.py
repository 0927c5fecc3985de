# Ontofilter - Axiom selection for ontology graphs
# Copyright (c) 2025 Matt Varendorff
# SPDX-License-Identifier: BSL-1.0

"""Load ontology graphs into Neo4j."""

import hashlib
import json
from typing import Optional

from neo4j import Driver, GraphDatabase

from ontofilter.models import Axiom, Entity, Ontology


def axiom_key(axiom: Axiom) -> str:
    """Stable identifier for an axiom, derived from its content."""
    payload = json.dumps(axiom.model_dump(mode="json"), sort_keys=True)
    return hashlib.sha1(payload.encode()).hexdigest()[:16]


class Neo4jLoader:
    """Load ontology graphs into Neo4j."""

    def __init__(
        self,
        uri: str = "bolt://localhost:7687",
        user: str = "neo4j",
        password: str = "ontofilterpass",
    ) -> None:
        """Initialize Neo4j connection.

        Args:
            uri: Neo4j bolt URI.
            user: Database username.
            password: Database password.
        """
        self.driver: Driver = GraphDatabase.driver(uri, auth=(user, password))

    def close(self) -> None:
        """Close the database connection."""
        self.driver.close()

    def __enter__(self) -> "Neo4jLoader":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def load_ontology(self, ontology: Ontology) -> None:
        """Load a complete ontology graph.

        Entities become ``:Entity`` nodes, axioms become ``:Axiom`` nodes with
        ``REFERENCES`` edges (carrying the term position) to their entities,
        and anonymous entities get ``OPERAND`` edges to their operands.
        When the graph has an IRI, an ``:Ontology`` node ``ASSERTS`` each axiom.

        Args:
            ontology: Ontology to load.
        """
        with self.driver.session() as session:
            if ontology.iri:
                session.execute_write(self._create_ontology, ontology.iri)

            for entity in ontology.entities.values():
                session.execute_write(self._create_entity, entity)

            for entity in ontology.entities.values():
                if entity.operands:
                    session.execute_write(self._create_operands, entity)

            for axiom in ontology.axioms:
                session.execute_write(self._create_axiom, axiom, ontology.iri)

    @staticmethod
    def _create_ontology(tx, iri: str) -> None:
        tx.run("MERGE (o:Ontology {iri: $iri})", iri=iri)

    @staticmethod
    def _create_entity(tx, entity: Entity) -> None:
        """Create an Entity node."""
        query = """
        MERGE (e:Entity {id: $id})
        SET e.kind = $kind,
            e.anonymous = $anonymous,
            e.expression = $expression
        """
        tx.run(
            query,
            id=entity.id,
            kind=entity.kind.value if entity.kind else None,
            anonymous=entity.anonymous,
            expression=entity.expression,
        )

    @staticmethod
    def _create_operands(tx, entity: Entity) -> None:
        """Create OPERAND relationships from an anonymous expression."""
        tx.run(
            """
            MATCH (e:Entity {id: $id})
            UNWIND range(0, size($operands) - 1) AS position
            MATCH (o:Entity {id: $operands[position]})
            MERGE (e)-[:OPERAND {position: position}]->(o)
            """,
            id=entity.id,
            operands=list(entity.operands),
        )

    @staticmethod
    def _create_axiom(tx, axiom: Axiom, ontology_iri: Optional[str]) -> None:
        """Create an Axiom node and its REFERENCES relationships."""
        query = """
        MERGE (a:Axiom {key: $key})
        SET a.type = $type,
            a.terms = $terms,
            a.value = $value,
            a.ontology = $ontology
        WITH a
        UNWIND range(0, size($terms) - 1) AS position
        MATCH (e:Entity {id: $terms[position]})
        MERGE (a)-[:REFERENCES {position: position}]->(e)
        """
        tx.run(
            query,
            key=axiom_key(axiom),
            type=axiom.axiom_type.value,
            terms=list(axiom.terms),
            value=axiom.value.value if axiom.value else None,
            ontology=ontology_iri,
        )
        if ontology_iri:
            tx.run(
                """
                MATCH (o:Ontology {iri: $iri}), (a:Axiom {key: $key})
                MERGE (o)-[:ASSERTS]->(a)
                """,
                iri=ontology_iri,
                key=axiom_key(axiom),
            )

    def count_nodes(self) -> dict:
        """Count nodes by type.

        Returns:
            Dict with node counts.
        """
        with self.driver.session() as session:
            entities = session.run("MATCH (e:Entity) RETURN count(e) as count").single()["count"]
            axioms = session.run("MATCH (a:Axiom) RETURN count(a) as count").single()["count"]

            return {
                "entities": entities,
                "axioms": axioms,
            }

    def get_entity(self, entity_id: str) -> Optional[dict]:
        """Get an entity by IRI.

        Args:
            entity_id: Entity IRI or blank node label.

        Returns:
            Entity data as dict or None.
        """
        with self.driver.session() as session:
            result = session.run(
                "MATCH (e:Entity {id: $id}) RETURN e",
                id=entity_id,
            )
            record = result.single()
            if record:
                return dict(record["e"])
            return None

    def get_axioms_by_type(self, axiom_type: str) -> list:
        """Get all axioms of one type.

        Args:
            axiom_type: Functional-syntax name, e.g. "SubClassOf".

        Returns:
            List of axiom dicts.
        """
        with self.driver.session() as session:
            result = session.run(
                """
                MATCH (a:Axiom {type: $type})
                RETURN a
                """,
                type=axiom_type,
            )
            return [dict(record["a"]) for record in result]

    def get_referencing_axioms(self, entity_id: str) -> list:
        """Get axioms that reference an entity directly.

        Args:
            entity_id: Entity IRI.

        Returns:
            List of axiom dicts.
        """
        with self.driver.session() as session:
            result = session.run(
                """
                MATCH (a:Axiom)-[:REFERENCES]->(e:Entity {id: $id})
                RETURN DISTINCT a
                """,
                id=entity_id,
            )
            return [dict(record["a"]) for record in result]
