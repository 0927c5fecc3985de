# Ontofilter - Axiom selection for ontology graphs
# Copyright (c) 2025 Matt Varendorff
# SPDX-License-Identifier: BSL-1.0

"""Expand seed entities into the entities a select clause refers to."""

from typing import FrozenSet, Iterable, Set

from ontofilter.graph import OntologyStore
from ontofilter.models import RelationType

from .parser import SelectClause


def effective_relation_types(clause: SelectClause) -> FrozenSet[RelationType]:
    """Relation types a clause expands with.

    A clause with neither relation names nor annotations (e.g. a bare
    ``complement``) selects the seeds themselves.
    """
    if clause.relation_types or clause.annotations:
        return clause.relation_types
    return frozenset({RelationType.SELF})


class EntitySelector:
    """Compute related and annotated entity sets against one graph."""

    def __init__(self, store: OntologyStore) -> None:
        self.store = store

    def related(self, seeds: Iterable[str], relation_types: Iterable[RelationType]) -> Set[str]:
        """Union of the named entities reached from any seed by any relation."""
        seeds = list(seeds)
        found: Set[str] = set()
        for relation in relation_types:
            found |= self.store.related_to_any(seeds, relation)
        return found

    def select(self, seeds: Iterable[str], clause: SelectClause) -> Set[str]:
        """Entities a clause refers to: related entities plus annotated ones.

        The result is never inverted here; complements are applied by the
        filter step chosen for the clause.
        """
        selected = self.related(seeds, effective_relation_types(clause))
        for annotation in clause.annotations:
            selected |= self.store.annotated(annotation)
        return selected

    def complement(self, entities: Iterable[str]) -> Set[str]:
        """All named entities of the graph except ``entities``."""
        return self.store.entities() - set(entities)

    def anonymous_related(self, seeds: Iterable[str], relation_types: Iterable[RelationType]) -> Set[str]:
        """Anonymous entities structurally related to any seed.

        An empty relation set means anonymous entities used directly
        alongside a seed.
        """
        relations = set(relation_types) or {RelationType.SELF}
        seeds = list(seeds)
        found: Set[str] = set()
        for relation in relations:
            for seed in seeds:
                found |= self.store.anonymous_related(seed, relation)
        return found
