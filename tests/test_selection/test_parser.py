"""Tests for --axioms and --select parsing."""

import pytest

from ontofilter.errors import InvalidAxiomType, InvalidSelect, UnimplementedFeature, UnresolvableIdentifier
from ontofilter.models import (
    A_BOX_AXIOM_TYPES,
    ALL_AXIOM_TYPES,
    R_BOX_AXIOM_TYPES,
    T_BOX_AXIOM_TYPES,
    AnnotationValue,
    AxiomType,
    PrefixMap,
    RelationType,
    ValueKind,
)
from ontofilter.selection import (
    DEFAULT_CLAUSE,
    SelectClause,
    parse_annotation,
    parse_axiom_type,
    parse_select,
    parse_selects,
    resolve_axiom_types,
)

RDFS_LABEL = "http://www.w3.org/2000/01/rdf-schema#label"


@pytest.fixture
def prefixes():
    return PrefixMap({"ex": "http://example.org/"})


class TestResolveAxiomTypes:
    """Tests for axiom type resolution."""

    def test_empty_means_all(self):
        assert resolve_axiom_types([]) == set(ALL_AXIOM_TYPES)
        assert resolve_axiom_types(None) == set(ALL_AXIOM_TYPES)

    def test_all(self):
        assert resolve_axiom_types(["all"]) == set(ALL_AXIOM_TYPES)

    def test_groups(self):
        assert resolve_axiom_types(["a_box"]) == set(A_BOX_AXIOM_TYPES)
        assert resolve_axiom_types(["t_box"]) == set(T_BOX_AXIOM_TYPES)
        assert resolve_axiom_types(["r_box"]) == set(R_BOX_AXIOM_TYPES)

    def test_plus_joins_tokens(self):
        """'+' unions the named types and groups."""
        assert resolve_axiom_types(["subclassof+a_box"]) == set(A_BOX_AXIOM_TYPES) | {AxiomType.SUBCLASS_OF}

    def test_hyphens_are_ignored(self):
        assert resolve_axiom_types(["sub-class-of"]) == {AxiomType.SUBCLASS_OF}

    def test_group_names_keep_underscores(self):
        """Removing '-' from 'a-box' leaves 'abox', which names nothing."""
        with pytest.raises(InvalidAxiomType):
            resolve_axiom_types(["a-box"])

    def test_case_insensitive(self):
        assert resolve_axiom_types(["SubClassOf"]) == {AxiomType.SUBCLASS_OF}
        assert resolve_axiom_types(["ALL"]) == set(ALL_AXIOM_TYPES)

    def test_several_values(self):
        assert resolve_axiom_types(["subclassof", "classassertion"]) == {
            AxiomType.SUBCLASS_OF,
            AxiomType.CLASS_ASSERTION,
        }

    def test_invalid_token(self):
        with pytest.raises(InvalidAxiomType) as exc_info:
            resolve_axiom_types(["subclassof+foo"])
        assert exc_info.value.token == "foo"
        assert str(exc_info.value) == "foo is not a valid axiom type"

    def test_empty_token_after_plus(self):
        with pytest.raises(InvalidAxiomType):
            resolve_axiom_types(["subclassof+"])

    def test_parse_single_token(self):
        assert parse_axiom_type("equivalentclasses") == {AxiomType.EQUIVALENT_CLASSES}


class TestParseSelect:
    """Tests for select clause parsing."""

    def test_single_relation(self):
        clause = parse_select("parents")
        assert clause.relation_types == {RelationType.PARENTS}
        assert not clause.complement
        assert not clause.named
        assert not clause.anonymous

    def test_relations_form_union(self):
        clause = parse_select("parents equivalents")
        assert clause.relation_types == {RelationType.PARENTS, RelationType.EQUIVALENTS}

    def test_flags(self):
        clause = parse_select("complement named self")
        assert clause.relation_types == {RelationType.SELF}
        assert clause.complement
        assert clause.named
        assert not clause.anonymous

    def test_flags_only(self):
        clause = parse_select("anonymous")
        assert clause.relation_types == frozenset()
        assert clause.anonymous

    def test_empty_value(self):
        for token in ("", "   "):
            with pytest.raises(InvalidSelect):
                parse_select(token)

    def test_extra_whitespace(self):
        assert parse_select("  self   children ").relation_types == {
            RelationType.SELF,
            RelationType.CHILDREN,
        }

    def test_case_insensitive(self):
        clause = parse_select("Parents NAMED")
        assert clause.relation_types == {RelationType.PARENTS}
        assert clause.named

    def test_invalid_word(self):
        with pytest.raises(InvalidSelect) as exc_info:
            parse_select("parents cousins")
        assert exc_info.value.token == "cousins"
        assert str(exc_info.value) == "cousins is not a valid selection"

    def test_annotation_clause(self, prefixes):
        clause = parse_select("rdfs:label='pizza'", prefixes)
        assert clause.relation_types == frozenset()
        assert len(clause.annotations) == 1
        (annotation,) = clause.annotations
        assert annotation.property == RDFS_LABEL
        assert annotation.value == AnnotationValue(kind=ValueKind.LITERAL, value="pizza")

    def test_no_selects_means_self(self):
        assert parse_selects([]) == [DEFAULT_CLAUSE]
        assert DEFAULT_CLAUSE == SelectClause(relation_types=frozenset({RelationType.SELF}))

    def test_selects_keep_order(self):
        clauses = parse_selects(["parents", "complement"])
        assert clauses[0].relation_types == {RelationType.PARENTS}
        assert clauses[1].complement


class TestParseAnnotation:
    """Tests for CURIE=value annotation tokens."""

    def test_literal(self, prefixes):
        annotation = parse_annotation("rdfs:label='a b c'", prefixes)
        assert annotation.value == AnnotationValue(kind=ValueKind.LITERAL, value="a b c")

    def test_bracketed_iri(self, prefixes):
        annotation = parse_annotation("rdfs:seeAlso=<http://example.org/X>", prefixes)
        assert annotation.value == AnnotationValue(kind=ValueKind.IRI, value="http://example.org/X")

    def test_curie_value(self, prefixes):
        annotation = parse_annotation("rdfs:seeAlso=ex:X", prefixes)
        assert annotation.value == AnnotationValue(kind=ValueKind.IRI, value="http://example.org/X")

    def test_pattern_is_unimplemented(self, prefixes):
        with pytest.raises(UnimplementedFeature) as exc_info:
            parse_annotation("rdfs:label=~'pizza.*'", prefixes)
        assert exc_info.value.name == "pattern"

    def test_two_equals_signs(self, prefixes):
        with pytest.raises(InvalidSelect):
            parse_annotation("rdfs:label='a=b'", prefixes)

    def test_unknown_property_prefix(self, prefixes):
        with pytest.raises(UnresolvableIdentifier):
            parse_annotation("nope:label='pizza'", prefixes)

    def test_unknown_value_prefix(self, prefixes):
        with pytest.raises(UnresolvableIdentifier):
            parse_annotation("rdfs:seeAlso=nope:X", prefixes)
