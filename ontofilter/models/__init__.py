# Ontofilter - Axiom selection for ontology graphs
# Copyright (c) 2025 Matt Varendorff
# SPDX-License-Identifier: BSL-1.0

"""Data models for ontology graphs."""

from .ontology import (
    A_BOX_AXIOM_TYPES,
    ALL_AXIOM_TYPES,
    R_BOX_AXIOM_TYPES,
    T_BOX_AXIOM_TYPES,
    Annotation,
    AnnotationValue,
    Axiom,
    AxiomType,
    Entity,
    EntityKind,
    Ontology,
    ValueKind,
)
from .prefixes import DEFAULT_PREFIXES, PrefixMap
from .relations import RelationType

__all__ = [
    "A_BOX_AXIOM_TYPES",
    "ALL_AXIOM_TYPES",
    "Annotation",
    "AnnotationValue",
    "Axiom",
    "AxiomType",
    "DEFAULT_PREFIXES",
    "Entity",
    "EntityKind",
    "Ontology",
    "PrefixMap",
    "R_BOX_AXIOM_TYPES",
    "RelationType",
    "T_BOX_AXIOM_TYPES",
    "ValueKind",
]
