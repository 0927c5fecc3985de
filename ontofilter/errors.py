# Ontofilter - Axiom selection for ontology graphs
# Copyright (c) 2025 Matt Varendorff
# SPDX-License-Identifier: BSL-1.0

"""Validation errors raised while parsing filter options and ontologies.

Every error carries the offending token so the command line and the API can
report exactly which input was rejected.
"""


class OntofilterError(ValueError):
    """Base class for all filter validation failures."""


class InvalidAxiomType(OntofilterError):
    """An --axioms token matches no axiom type, group, or 'all'."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"{token} is not a valid axiom type")


class InvalidSelect(OntofilterError):
    """A --select token matches no relation type and no flag keyword."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"{token} is not a valid selection")


class UnresolvableIdentifier(OntofilterError):
    """A CURIE or IRI could not be expanded with the known prefixes."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"{token} could not be resolved to an IRI")


class UnimplementedFeature(OntofilterError):
    """Input asks for a feature that is deliberately not supported."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} matching is not yet implemented")


class OntologyFormatError(OntofilterError):
    """An ontology file is structurally invalid."""
