# Ontofilter - Axiom selection for ontology graphs
# Copyright (c) 2025 Matt Varendorff
# SPDX-License-Identifier: BSL-1.0

"""Run a chain of select clauses over an ontology graph.

The seed entities are fixed once for the whole run. Each clause filters the
graph produced by the previous clause, with relations looked up in that
graph. After the last clause, entity records no axiom references are
trimmed.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Collection, List, Optional, Set

from ontofilter.graph import OntologyStore
from ontofilter.models import AxiomType, Ontology, PrefixMap

from .filters import filter_anonymous, filter_axioms, filter_complement, merge
from .parser import SelectClause, parse_selects, resolve_axiom_types
from .selector import EntitySelector

logger = logging.getLogger(__name__)


@dataclass
class FilterOptions:
    """Options of one filter run, as given on the command line."""

    entities: List[str] = field(default_factory=list)  # CURIEs or IRIs
    selects: List[str] = field(default_factory=list)
    axioms: List[str] = field(default_factory=list)
    trim: bool = True
    prefixes: List[str] = field(default_factory=list)  # "ex: http://example.org/"
    output_iri: Optional[str] = None  # replaces the ontology IRI of the result


def read_term_file(path: Path) -> List[str]:
    """Read one term per line, skipping blank lines and ``#`` comments.

    Text after the first whitespace on a line is ignored, so term files may
    carry labels next to the identifiers.
    """
    terms = []
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        terms.append(line.split()[0])
    return terms


class FilterPipeline:
    """Fold select clauses over an ontology graph."""

    def __init__(self, options: Optional[FilterOptions] = None) -> None:
        self.options = options or FilterOptions()

    def run(self, ontology: Ontology) -> Ontology:
        """Filter ``ontology`` and return the resulting graph.

        All options are parsed before any filtering starts. The input graph
        is never modified.

        Raises:
            InvalidAxiomType: For an unknown --axioms token.
            InvalidSelect: For an unknown --select word.
            UnresolvableIdentifier: For a seed, prefix, annotation or output
                IRI that cannot be expanded.
            UnimplementedFeature: For pattern-valued annotations.
        """
        # Document prefixes win over --prefix, as when the document was loaded
        prefixes = PrefixMap()
        prefixes.add_declarations(self.options.prefixes)
        for prefix, namespace in ontology.prefixes.items():
            prefixes.add(prefix, namespace)

        axiom_types = resolve_axiom_types(self.options.axioms)
        clauses = parse_selects(self.options.selects, prefixes)
        seeds = self.resolve_seeds(ontology, prefixes)
        output_iri = prefixes.resolve(self.options.output_iri) if self.options.output_iri else None

        logger.info(
            f"Filtering {len(ontology.axioms)} axioms with {len(clauses)} clause(s), "
            f"{len(seeds)} seed entities, {len(axiom_types)} axiom types"
        )

        current = ontology
        for i, clause in enumerate(clauses, start=1):
            current = self.apply_clause(current, seeds, clause, axiom_types)
            logger.info(f"Clause {i}: {len(current.axioms)} axioms remain")

        if self.options.trim:
            before = len(current.entities)
            current = current.trim_dangling()
            logger.debug(f"Trimmed {before - len(current.entities)} dangling entities")

        if output_iri:
            current = current.model_copy(update={"iri": output_iri})

        return current

    def resolve_seeds(self, ontology: Ontology, prefixes: PrefixMap) -> Set[str]:
        """Expand --entity values, or take every named entity when none are given."""
        seeds = {prefixes.resolve(term) for term in self.options.entities}
        if not seeds:
            return ontology.named_entity_ids()
        missing = seeds - ontology.named_entity_ids()
        if missing:
            logger.warning(f"Seed entities not in ontology: {', '.join(sorted(missing))}")
        return seeds

    @staticmethod
    def apply_clause(
        ontology: Ontology,
        seeds: Collection[str],
        clause: SelectClause,
        axiom_types: Collection[AxiomType],
    ) -> Ontology:
        """Apply one clause and return the new graph."""
        store = OntologyStore(ontology)
        selector = EntitySelector(store)

        if clause.anonymous and not clause.named:
            logger.debug("Filtering for references to related anonymous entities")
            if clause.complement:
                logger.debug("Filtering for complement set")
                seeds = selector.complement(seeds)
            return filter_anonymous(ontology, seeds, clause.relation_types, axiom_types, store)

        entities = selector.select(seeds, clause)

        if clause.named and not clause.anonymous:
            logger.debug("Filtering for references to related named entities")
            if clause.complement:
                logger.debug("Filtering for complement set")
                return filter_complement(ontology, entities, axiom_types)
            return filter_axioms(ontology, entities, axiom_types)

        # Both flags or neither: named and anonymous references together
        logger.debug("Filtering for references to all related entities")
        if clause.complement:
            logger.debug("Filtering for complement set")
            return filter_complement(ontology, entities, axiom_types)
        return merge(
            filter_axioms(ontology, entities, axiom_types),
            filter_anonymous(ontology, seeds, clause.relation_types, axiom_types, store),
        )


def run_filter(ontology: Ontology, options: Optional[FilterOptions] = None) -> Ontology:
    """Convenience wrapper around ``FilterPipeline(options).run(ontology)``."""
    return FilterPipeline(options).run(ontology)
