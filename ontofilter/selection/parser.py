# Ontofilter - Axiom selection for ontology graphs
# Copyright (c) 2025 Matt Varendorff
# SPDX-License-Identifier: BSL-1.0

"""Parsers for the --axioms and --select option values.

``--axioms`` takes axiom type names, ``all`` or one of the groups ``a_box``,
``t_box`` and ``r_box``, joined with ``+``. ``--select`` takes clauses such as
``"parents equivalents"``, ``"complement named"`` or an annotation match like
``rdfs:label='pizza'``.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, List, Optional, Set

from ontofilter.errors import InvalidAxiomType, InvalidSelect, UnimplementedFeature
from ontofilter.models import (
    A_BOX_AXIOM_TYPES,
    ALL_AXIOM_TYPES,
    R_BOX_AXIOM_TYPES,
    T_BOX_AXIOM_TYPES,
    Annotation,
    AnnotationValue,
    AxiomType,
    PrefixMap,
    RelationType,
    ValueKind,
)

AXIOM_TYPE_GROUPS = {
    "all": ALL_AXIOM_TYPES,
    "a_box": A_BOX_AXIOM_TYPES,
    "t_box": T_BOX_AXIOM_TYPES,
    "r_box": R_BOX_AXIOM_TYPES,
}

_AXIOM_TYPES_BY_NAME = {t.value.lower(): t for t in AxiomType}

PATTERN_MARKER = "~'"

COMPLEMENT = "complement"
NAMED = "named"
ANONYMOUS = "anonymous"


@dataclass(frozen=True)
class SelectClause:
    """One parsed --select value."""

    relation_types: FrozenSet[RelationType] = field(default_factory=frozenset)
    annotations: FrozenSet[Annotation] = field(default_factory=frozenset)
    complement: bool = False
    named: bool = False
    anonymous: bool = False


DEFAULT_CLAUSE = SelectClause(relation_types=frozenset({RelationType.SELF}))


def parse_axiom_type(token: str) -> Set[AxiomType]:
    """Resolve one normalized token to the axiom types it denotes.

    Raises:
        InvalidAxiomType: If the token is no type name, group, or ``all``.
    """
    name = token.strip().lower()
    if name in _AXIOM_TYPES_BY_NAME:
        return {_AXIOM_TYPES_BY_NAME[name]}
    if name in AXIOM_TYPE_GROUPS:
        return set(AXIOM_TYPE_GROUPS[name])
    raise InvalidAxiomType(token)


def resolve_axiom_types(values: Optional[Iterable[str]]) -> Set[AxiomType]:
    """Resolve --axioms values into a set of axiom types.

    Each value may join several tokens with ``+``; ``-`` characters are
    removed before comparison, so ``sub-class-of`` names ``SubClassOf``.

    Args:
        values: Raw option values. None or empty means ``all``.

    Returns:
        Non-empty set of axiom types.

    Raises:
        InvalidAxiomType: For the first unrecognized token.
    """
    tokens: List[str] = []
    for value in values or []:
        for part in value.split("+"):
            tokens.append(part.replace("-", ""))
    if not tokens:
        tokens.append("all")

    axiom_types: Set[AxiomType] = set()
    for token in tokens:
        axiom_types |= parse_axiom_type(token)
    return axiom_types


def parse_annotation(token: str, prefixes: PrefixMap) -> Annotation:
    """Parse a ``CURIE=value`` select token into an annotation.

    The value is read as ``<IRI>``, ``'literal'`` or a CURIE. Values using the
    ``~'...'`` pattern form are rejected.

    Raises:
        InvalidSelect: If the token does not contain exactly one ``=``.
        UnresolvableIdentifier: If the property or an IRI value cannot be expanded.
        UnimplementedFeature: For pattern values.
    """
    if token.count("=") != 1:
        raise InvalidSelect(token)
    prop, value = token.split("=")
    property_iri = prefixes.resolve(prop)
    value = value.strip()

    if value.startswith("<") and value.endswith(">"):
        annotation_value = AnnotationValue(kind=ValueKind.IRI, value=prefixes.resolve(value[1:-1]))
    elif PATTERN_MARKER in value:
        raise UnimplementedFeature(ValueKind.PATTERN.value)
    elif len(value) >= 2 and value.startswith("'") and value.endswith("'"):
        annotation_value = AnnotationValue(kind=ValueKind.LITERAL, value=value[1:-1])
    else:
        annotation_value = AnnotationValue(kind=ValueKind.IRI, value=prefixes.resolve(value))

    return Annotation(property=property_iri, value=annotation_value)


def parse_select(token: str, prefixes: Optional[PrefixMap] = None) -> SelectClause:
    """Parse one --select value.

    A value containing ``=`` is a single annotation match. Otherwise it is
    split on whitespace into relation names and the flags ``complement``,
    ``named`` and ``anonymous``; several relation names form a union.

    Raises:
        InvalidSelect: For an empty value or an unrecognized word.
    """
    if "=" in token:
        annotation = parse_annotation(token, prefixes or PrefixMap())
        return SelectClause(annotations=frozenset({annotation}))

    words = token.split()
    if not words:
        raise InvalidSelect(token)

    relation_types: Set[RelationType] = set()
    complement = named = anonymous = False
    for word in words:
        relation = RelationType.from_token(word)
        if relation is not None:
            relation_types.add(relation)
            continue
        keyword = word.lower()
        if keyword == COMPLEMENT:
            complement = True
        elif keyword == NAMED:
            named = True
        elif keyword == ANONYMOUS:
            anonymous = True
        else:
            raise InvalidSelect(word)

    return SelectClause(
        relation_types=frozenset(relation_types),
        complement=complement,
        named=named,
        anonymous=anonymous,
    )


def parse_selects(tokens: Optional[Iterable[str]], prefixes: Optional[PrefixMap] = None) -> List[SelectClause]:
    """Parse every --select value in order; no values gives the ``self`` clause."""
    clauses = [parse_select(token, prefixes) for token in tokens or []]
    return clauses or [DEFAULT_CLAUSE]
