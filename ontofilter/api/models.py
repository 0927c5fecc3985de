# Ontofilter - Axiom selection for ontology graphs
# Copyright (c) 2025 Matt Varendorff
# SPDX-License-Identifier: BSL-1.0

"""API request and response models."""

from typing import List, Optional

from pydantic import BaseModel, Field


class FilterRequest(BaseModel):
    """Request to filter an ontology."""

    ontology: str = Field(..., description="Ontology document in TOML format")
    entities: List[str] = Field(
        default_factory=list, description="Seed entity CURIEs or IRIs (default: all entities)"
    )
    selects: List[str] = Field(
        default_factory=list, description="Select clauses, applied in order (default: self)"
    )
    axioms: List[str] = Field(
        default_factory=list, description="Axiom type tokens, '+'-joinable (default: all)"
    )
    trim: bool = Field(default=True, description="Drop entities no axiom references")
    prefixes: List[str] = Field(
        default_factory=list, description="Extra prefixes such as 'ex: http://example.org/'"
    )
    output_iri: Optional[str] = Field(default=None, description="Ontology IRI of the filtered graph")


class CountsResponse(BaseModel):
    """Entity and axiom counts of a graph."""

    entities: int
    anonymous_entities: int
    axioms: int


class FilterResponse(BaseModel):
    """Response from the filter endpoint."""

    ontology: str
    input: CountsResponse
    output: CountsResponse


class StatsResponse(BaseModel):
    """Statistics about the exported graph database."""

    entities: int
    axioms: int


class EntityResponse(BaseModel):
    """An exported entity node."""

    id: str
    kind: Optional[str] = None
    anonymous: bool = False
    expression: Optional[str] = None


class AxiomRecordResponse(BaseModel):
    """An exported axiom node."""

    key: str
    type: str
    terms: List[str]
    value: Optional[str] = None
    ontology: Optional[str] = None


class AxiomListResponse(BaseModel):
    """Axioms returned by a lookup."""

    axioms: List[AxiomRecordResponse]
    count: int
