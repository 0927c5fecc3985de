# Ontofilter - Axiom selection for ontology graphs
# Copyright (c) 2025 Matt Varendorff
# SPDX-License-Identifier: BSL-1.0

"""In-memory traversal over an ontology graph.

The store indexes the structural axioms of one ``Ontology`` (subclass and
subproperty hierarchies, equivalences, class assertions, domains and ranges,
annotation assertions) and answers "which entities are related to this one"
for each ``RelationType``. It never changes the graph it indexes.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, Set

from ontofilter.models import Annotation, AxiomType, Ontology, RelationType

logger = logging.getLogger(__name__)

# (sub, super)
HIERARCHY_AXIOMS = {
    AxiomType.SUBCLASS_OF,
    AxiomType.SUB_OBJECT_PROPERTY_OF,
    AxiomType.SUB_DATA_PROPERTY_OF,
    AxiomType.SUB_ANNOTATION_PROPERTY_OF,
}

EQUIVALENCE_AXIOMS = {
    AxiomType.EQUIVALENT_CLASSES,
    AxiomType.EQUIVALENT_OBJECT_PROPERTIES,
    AxiomType.EQUIVALENT_DATA_PROPERTIES,
}

# (property, class)
DOMAIN_AXIOMS = {
    AxiomType.OBJECT_PROPERTY_DOMAIN,
    AxiomType.DATA_PROPERTY_DOMAIN,
    AxiomType.ANNOTATION_PROPERTY_DOMAIN,
}

RANGE_AXIOMS = {
    AxiomType.OBJECT_PROPERTY_RANGE,
    AxiomType.DATA_PROPERTY_RANGE,
    AxiomType.ANNOTATION_PROPERTY_RANGE,
}


class OntologyStore:
    """Relation index over a single ontology graph."""

    def __init__(self, ontology: Ontology) -> None:
        """Index the graph.

        Args:
            ontology: Graph to traverse. Build a new store for every new graph.
        """
        self.ontology = ontology
        self._parents: Dict[str, Set[str]] = defaultdict(set)
        self._children: Dict[str, Set[str]] = defaultdict(set)
        self._equivalents: Dict[str, Set[str]] = defaultdict(set)
        self._types: Dict[str, Set[str]] = defaultdict(set)
        self._instances: Dict[str, Set[str]] = defaultdict(set)
        self._domains: Dict[str, Set[str]] = defaultdict(set)
        self._ranges: Dict[str, Set[str]] = defaultdict(set)
        self._cooccurring: Dict[str, Set[str]] = defaultdict(set)
        self._index()

    def _index(self) -> None:
        for axiom in self.ontology.axioms:
            terms = axiom.terms
            if axiom.axiom_type in HIERARCHY_AXIOMS and len(terms) == 2:
                sub, sup = terms
                self._parents[sub].add(sup)
                self._children[sup].add(sub)
            elif axiom.axiom_type in EQUIVALENCE_AXIOMS:
                for term in terms:
                    self._equivalents[term].update(t for t in terms if t != term)
            elif axiom.axiom_type == AxiomType.CLASS_ASSERTION and len(terms) == 2:
                cls, individual = terms
                self._types[individual].add(cls)
                self._instances[cls].add(individual)
            elif axiom.axiom_type in DOMAIN_AXIOMS and len(terms) == 2:
                self._domains[terms[0]].add(terms[1])
            elif axiom.axiom_type in RANGE_AXIOMS and len(terms) == 2:
                self._ranges[terms[0]].add(terms[1])

            for term in terms:
                self._cooccurring[term].update(t for t in terms if t != term)

        logger.debug(
            f"Indexed {len(self.ontology.axioms)} axioms: "
            f"{len(self._parents)} entities with parents, "
            f"{len(self._equivalents)} with equivalents"
        )

    def entities(self) -> Set[str]:
        """All named entities of the graph."""
        return self.ontology.named_entity_ids()

    def is_anonymous(self, entity_id: str) -> bool:
        return self.ontology.is_anonymous(entity_id)

    def _neighbours(self, entity_id: str, relation: RelationType) -> Set[str]:
        """Named and anonymous entities related to ``entity_id``."""
        if relation == RelationType.SELF:
            return {entity_id}
        if relation == RelationType.PARENTS:
            return set(self._parents.get(entity_id, ()))
        if relation == RelationType.CHILDREN:
            return set(self._children.get(entity_id, ()))
        if relation == RelationType.ANCESTORS:
            return self._closure(entity_id, self._parents)
        if relation == RelationType.DESCENDANTS:
            return self._closure(entity_id, self._children)
        if relation == RelationType.EQUIVALENTS:
            return set(self._equivalents.get(entity_id, ()))
        if relation == RelationType.TYPES:
            return set(self._types.get(entity_id, ()))
        if relation == RelationType.INSTANCES:
            return set(self._instances.get(entity_id, ()))
        if relation == RelationType.DOMAINS:
            return set(self._domains.get(entity_id, ()))
        if relation == RelationType.RANGES:
            return set(self._ranges.get(entity_id, ()))
        raise ValueError(f"Unhandled relation type: {relation}")

    @staticmethod
    def _closure(entity_id: str, edges: Dict[str, Set[str]]) -> Set[str]:
        found: Set[str] = set()
        frontier = list(edges.get(entity_id, ()))
        while frontier:
            current = frontier.pop()
            if current in found or current == entity_id:
                continue
            found.add(current)
            frontier.extend(edges.get(current, ()))
        return found

    def related(self, entity_id: str, relation: RelationType) -> Set[str]:
        """Named entities related to ``entity_id`` by ``relation``.

        ``SELF`` returns the entity itself; ``ANCESTORS`` and ``DESCENDANTS``
        are transitive and exclude the starting entity.
        """
        return {e for e in self._neighbours(entity_id, relation) if not self.is_anonymous(e)}

    def anonymous_related(self, entity_id: str, relation: RelationType) -> Set[str]:
        """Anonymous entities structurally related to ``entity_id``.

        For ``SELF`` these are the anonymous expressions that appear next to
        the entity in some axiom, e.g. the filler in ``SubClassOf(A, X)``.
        Transitive relations collect the anonymous parents or children of the
        entity and of all its named ancestors or descendants.
        """
        if relation == RelationType.SELF:
            return {e for e in self._cooccurring.get(entity_id, ()) if self.is_anonymous(e)}
        return {e for e in self._neighbours(entity_id, relation) if self.is_anonymous(e)}

    def annotated(self, annotation: Annotation) -> Set[str]:
        """Named entities that carry ``annotation`` through an annotation assertion.

        Raises:
            UnimplementedFeature: If the annotation value is a pattern.
        """
        subjects: Set[str] = set()
        for axiom in self.ontology.axioms:
            if axiom.axiom_type != AxiomType.ANNOTATION_ASSERTION or axiom.value is None:
                continue
            if len(axiom.terms) != 2 or axiom.terms[0] != annotation.property:
                continue
            if annotation.value.matches(axiom.value) and not self.is_anonymous(axiom.terms[1]):
                subjects.add(axiom.terms[1])
        return subjects

    def related_to_any(self, entity_ids: Iterable[str], relation: RelationType) -> Set[str]:
        found: Set[str] = set()
        for entity_id in entity_ids:
            found |= self.related(entity_id, relation)
        return found
