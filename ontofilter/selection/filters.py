# Ontofilter - Axiom selection for ontology graphs
# Copyright (c) 2025 Matt Varendorff
# SPDX-License-Identifier: BSL-1.0

"""Axiom filters and graph merge.

Every function here returns a new ``Ontology``; input graphs are left as
they were. An axiom is only ever kept when its type is in ``axiom_types``.
"""

import logging
from typing import Collection, Dict, List, Optional, Set

from ontofilter.errors import OntologyFormatError
from ontofilter.graph import OntologyStore
from ontofilter.models import Axiom, AxiomType, Entity, Ontology, RelationType

from .selector import EntitySelector

logger = logging.getLogger(__name__)


def filter_axioms(
    ontology: Ontology,
    entities: Collection[str],
    axiom_types: Collection[AxiomType],
) -> Ontology:
    """Keep axioms that reference at least one of ``entities``.

    Args:
        ontology: Graph to filter.
        entities: Named entity IRIs.
        axiom_types: Axiom types allowed in the result.

    Returns:
        New graph with the matching axioms.
    """
    wanted = set(entities)
    kept = [
        axiom
        for axiom in ontology.axioms
        if axiom.axiom_type in axiom_types and not ontology.signature(axiom).isdisjoint(wanted)
    ]
    return ontology.subset(kept)


def filter_complement(
    ontology: Ontology,
    entities: Collection[str],
    axiom_types: Collection[AxiomType],
) -> Ontology:
    """Keep axioms that reference none of ``entities``."""
    unwanted = set(entities)
    kept = [
        axiom
        for axiom in ontology.axioms
        if axiom.axiom_type in axiom_types and ontology.signature(axiom).isdisjoint(unwanted)
    ]
    return ontology.subset(kept)


def filter_anonymous(
    ontology: Ontology,
    seeds: Collection[str],
    relation_types: Collection[RelationType],
    axiom_types: Collection[AxiomType],
    store: Optional[OntologyStore] = None,
) -> Ontology:
    """Keep axioms that use an anonymous entity related to one of ``seeds``.

    Args:
        ontology: Graph to filter.
        seeds: Named entities to start from.
        relation_types: How anonymous entities must relate to the seeds. An
            empty collection means "used directly next to a seed".
        axiom_types: Axiom types allowed in the result.
        store: Prebuilt index over ``ontology``.

    Returns:
        New graph with the matching axioms.
    """
    selector = EntitySelector(store or OntologyStore(ontology))
    anonymous = selector.anonymous_related(seeds, relation_types)
    logger.debug(f"Found {len(anonymous)} related anonymous entities")
    kept: List[Axiom] = [
        axiom
        for axiom in ontology.axioms
        if axiom.axiom_type in axiom_types and not ontology.anonymous_terms(axiom).isdisjoint(anonymous)
    ]
    return ontology.subset(kept)


def merge(*ontologies: Ontology) -> Ontology:
    """Union of graphs: axioms in first-seen order, duplicates collapse.

    Entity records and prefixes are combined; the first graph wins on
    conflicting keys.

    Raises:
        OntologyFormatError: If two graphs define the same blank node label
            as different class expressions.
    """
    if not ontologies:
        return Ontology()
    axioms: List[Axiom] = []
    seen: Set[Axiom] = set()
    entities: Dict[str, Entity] = {}
    prefixes: Dict[str, str] = {}
    for ontology in ontologies:
        for axiom in ontology.axioms:
            if axiom not in seen:
                seen.add(axiom)
                axioms.append(axiom)
        for entity_id, entity in ontology.entities.items():
            existing = entities.setdefault(entity_id, entity)
            if existing != entity and _defines_expression(existing) and _defines_expression(entity):
                raise OntologyFormatError(f"Conflicting definitions of anonymous entity {entity_id}")
        for prefix, namespace in ontology.prefixes.items():
            prefixes.setdefault(prefix, namespace)
    iri = next((o.iri for o in ontologies if o.iri), None)
    return Ontology(iri=iri, prefixes=prefixes, entities=entities, axioms=axioms)


def _defines_expression(entity: Entity) -> bool:
    return entity.anonymous and bool(entity.expression or entity.operands)
