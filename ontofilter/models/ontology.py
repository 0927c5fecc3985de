# Ontofilter - Axiom selection for ontology graphs
# Copyright (c) 2025 Matt Varendorff
# SPDX-License-Identifier: BSL-1.0

"""Pydantic models for ontology graphs: entities, axioms and annotations."""

import tomllib
from enum import Enum
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ontofilter.errors import OntologyFormatError, UnimplementedFeature

from .prefixes import BLANK_NODE_PREFIX, PrefixMap

XSD_STRING = "http://www.w3.org/2001/XMLSchema#string"


class AxiomType(str, Enum):
    """OWL 2 axiom kinds. Values are the functional-syntax names."""

    DECLARATION = "Declaration"
    # Class axioms
    SUBCLASS_OF = "SubClassOf"
    EQUIVALENT_CLASSES = "EquivalentClasses"
    DISJOINT_CLASSES = "DisjointClasses"
    DISJOINT_UNION = "DisjointUnion"
    # Object property axioms
    SUB_OBJECT_PROPERTY_OF = "SubObjectPropertyOf"
    SUB_PROPERTY_CHAIN_OF = "SubPropertyChainOf"
    EQUIVALENT_OBJECT_PROPERTIES = "EquivalentObjectProperties"
    DISJOINT_OBJECT_PROPERTIES = "DisjointObjectProperties"
    INVERSE_OBJECT_PROPERTIES = "InverseObjectProperties"
    OBJECT_PROPERTY_DOMAIN = "ObjectPropertyDomain"
    OBJECT_PROPERTY_RANGE = "ObjectPropertyRange"
    FUNCTIONAL_OBJECT_PROPERTY = "FunctionalObjectProperty"
    INVERSE_FUNCTIONAL_OBJECT_PROPERTY = "InverseFunctionalObjectProperty"
    REFLEXIVE_OBJECT_PROPERTY = "ReflexiveObjectProperty"
    IRREFLEXIVE_OBJECT_PROPERTY = "IrreflexiveObjectProperty"
    SYMMETRIC_OBJECT_PROPERTY = "SymmetricObjectProperty"
    ASYMMETRIC_OBJECT_PROPERTY = "AsymmetricObjectProperty"
    TRANSITIVE_OBJECT_PROPERTY = "TransitiveObjectProperty"
    # Data property axioms
    SUB_DATA_PROPERTY_OF = "SubDataPropertyOf"
    EQUIVALENT_DATA_PROPERTIES = "EquivalentDataProperties"
    DISJOINT_DATA_PROPERTIES = "DisjointDataProperties"
    DATA_PROPERTY_DOMAIN = "DataPropertyDomain"
    DATA_PROPERTY_RANGE = "DataPropertyRange"
    FUNCTIONAL_DATA_PROPERTY = "FunctionalDataProperty"
    DATATYPE_DEFINITION = "DatatypeDefinition"
    HAS_KEY = "HasKey"
    # Assertions
    SAME_INDIVIDUAL = "SameIndividual"
    DIFFERENT_INDIVIDUALS = "DifferentIndividuals"
    CLASS_ASSERTION = "ClassAssertion"
    OBJECT_PROPERTY_ASSERTION = "ObjectPropertyAssertion"
    NEGATIVE_OBJECT_PROPERTY_ASSERTION = "NegativeObjectPropertyAssertion"
    DATA_PROPERTY_ASSERTION = "DataPropertyAssertion"
    NEGATIVE_DATA_PROPERTY_ASSERTION = "NegativeDataPropertyAssertion"
    # Annotation axioms
    ANNOTATION_ASSERTION = "AnnotationAssertion"
    SUB_ANNOTATION_PROPERTY_OF = "SubAnnotationPropertyOf"
    ANNOTATION_PROPERTY_DOMAIN = "AnnotationPropertyDomain"
    ANNOTATION_PROPERTY_RANGE = "AnnotationPropertyRangeOf"
    # Rules
    SWRL_RULE = "Rule"


A_BOX_AXIOM_TYPES: FrozenSet[AxiomType] = frozenset(
    {
        AxiomType.CLASS_ASSERTION,
        AxiomType.SAME_INDIVIDUAL,
        AxiomType.DIFFERENT_INDIVIDUALS,
        AxiomType.OBJECT_PROPERTY_ASSERTION,
        AxiomType.NEGATIVE_OBJECT_PROPERTY_ASSERTION,
        AxiomType.DATA_PROPERTY_ASSERTION,
        AxiomType.NEGATIVE_DATA_PROPERTY_ASSERTION,
    }
)

T_BOX_AXIOM_TYPES: FrozenSet[AxiomType] = frozenset(
    {
        AxiomType.SUBCLASS_OF,
        AxiomType.EQUIVALENT_CLASSES,
        AxiomType.DISJOINT_CLASSES,
        AxiomType.DISJOINT_UNION,
        AxiomType.OBJECT_PROPERTY_DOMAIN,
        AxiomType.OBJECT_PROPERTY_RANGE,
        AxiomType.DATA_PROPERTY_DOMAIN,
        AxiomType.DATA_PROPERTY_RANGE,
        AxiomType.FUNCTIONAL_DATA_PROPERTY,
        AxiomType.DATATYPE_DEFINITION,
        AxiomType.HAS_KEY,
    }
)

R_BOX_AXIOM_TYPES: FrozenSet[AxiomType] = frozenset(
    {
        AxiomType.SUB_OBJECT_PROPERTY_OF,
        AxiomType.SUB_PROPERTY_CHAIN_OF,
        AxiomType.EQUIVALENT_OBJECT_PROPERTIES,
        AxiomType.DISJOINT_OBJECT_PROPERTIES,
        AxiomType.INVERSE_OBJECT_PROPERTIES,
        AxiomType.FUNCTIONAL_OBJECT_PROPERTY,
        AxiomType.INVERSE_FUNCTIONAL_OBJECT_PROPERTY,
        AxiomType.REFLEXIVE_OBJECT_PROPERTY,
        AxiomType.IRREFLEXIVE_OBJECT_PROPERTY,
        AxiomType.SYMMETRIC_OBJECT_PROPERTY,
        AxiomType.ASYMMETRIC_OBJECT_PROPERTY,
        AxiomType.TRANSITIVE_OBJECT_PROPERTY,
        AxiomType.SUB_DATA_PROPERTY_OF,
        AxiomType.EQUIVALENT_DATA_PROPERTIES,
        AxiomType.DISJOINT_DATA_PROPERTIES,
    }
)

ALL_AXIOM_TYPES: FrozenSet[AxiomType] = frozenset(AxiomType)


class EntityKind(str, Enum):
    """Kinds of OWL entities."""

    CLASS = "class"
    OBJECT_PROPERTY = "object_property"
    DATA_PROPERTY = "data_property"
    ANNOTATION_PROPERTY = "annotation_property"
    NAMED_INDIVIDUAL = "named_individual"
    DATATYPE = "datatype"


class ValueKind(str, Enum):
    """Kinds of annotation values."""

    IRI = "iri"
    LITERAL = "literal"
    PATTERN = "pattern"  # reserved, always rejected


class AnnotationValue(BaseModel):
    """The object of an annotation: an IRI, a literal, or a pattern."""

    model_config = ConfigDict(frozen=True)

    kind: ValueKind
    value: str
    language: Optional[str] = None
    datatype: Optional[str] = None

    def matches(self, other: "AnnotationValue") -> bool:
        """Check whether an asserted value satisfies this value.

        Literals match on lexical form, language tag and datatype, with a
        missing datatype read as xsd:string.

        Raises:
            UnimplementedFeature: If this value is a pattern.
        """
        if self.kind == ValueKind.PATTERN:
            raise UnimplementedFeature("pattern")
        if self.kind != other.kind or self.value != other.value:
            return False
        if self.kind == ValueKind.IRI:
            return True
        return (
            self.language == other.language
            and (self.datatype or XSD_STRING) == (other.datatype or XSD_STRING)
        )


class Annotation(BaseModel):
    """A property/value pair attached to an entity or an axiom."""

    model_config = ConfigDict(frozen=True)

    property: str
    value: AnnotationValue


class Entity(BaseModel):
    """A named entity, or an anonymous class expression built from operands."""

    model_config = ConfigDict(frozen=True)

    id: str  # full IRI, or a blank node label for anonymous entities
    kind: Optional[EntityKind] = None
    anonymous: bool = False
    expression: Optional[str] = None  # e.g. "ObjectSomeValuesFrom"
    operands: Tuple[str, ...] = ()


class Axiom(BaseModel):
    """A typed statement over an ordered list of entity references."""

    model_config = ConfigDict(frozen=True)

    axiom_type: AxiomType
    terms: Tuple[str, ...] = Field(min_length=1)
    value: Optional[AnnotationValue] = None  # asserted value for annotation/data assertions
    annotations: Tuple[Annotation, ...] = ()


class Ontology(BaseModel):
    """A working graph: entity records plus an ordered, duplicate-free axiom list.

    Transforms never change an instance in place; ``subset`` and
    ``trim_dangling`` return new graphs that share the unchanged records.
    """

    iri: Optional[str] = None
    prefixes: Dict[str, str] = Field(default_factory=dict)
    entities: Dict[str, Entity] = Field(default_factory=dict)
    axioms: List[Axiom] = Field(default_factory=list)

    @classmethod
    def build(
        cls,
        axioms: Iterable[Axiom],
        entities: Iterable[Entity] = (),
        iri: Optional[str] = None,
        prefixes: Optional[Dict[str, str]] = None,
    ) -> "Ontology":
        """Create a graph, adding implicit records for undeclared references."""
        records: Dict[str, Entity] = {}
        for entity in entities:
            records[entity.id] = entity
        unique: List[Axiom] = []
        seen: Set[Axiom] = set()
        for axiom in axioms:
            if axiom in seen:
                continue
            seen.add(axiom)
            unique.append(axiom)
            for term in axiom.terms:
                if term not in records:
                    records[term] = Entity(id=term, anonymous=term.startswith(BLANK_NODE_PREFIX))
        for entity in list(records.values()):
            for operand in entity.operands:
                if operand not in records:
                    records[operand] = Entity(id=operand, anonymous=operand.startswith(BLANK_NODE_PREFIX))
        return cls(iri=iri, prefixes=dict(prefixes or {}), entities=records, axioms=unique)

    def subset(self, axioms: Iterable[Axiom]) -> "Ontology":
        """Return a new graph holding ``axioms`` and this graph's entity records."""
        unique = list(dict.fromkeys(axioms))
        return Ontology(
            iri=self.iri,
            prefixes=dict(self.prefixes),
            entities=dict(self.entities),
            axioms=unique,
        )

    def is_anonymous(self, entity_id: str) -> bool:
        entity = self.entities.get(entity_id)
        if entity is None:
            return entity_id.startswith(BLANK_NODE_PREFIX)
        return entity.anonymous

    def named_entity_ids(self) -> Set[str]:
        """Ids of every named entity record in the graph."""
        return {e.id for e in self.entities.values() if not e.anonymous}

    def expand(self, entity_id: str) -> Set[str]:
        """Return ``entity_id`` plus every id reachable through anonymous operands."""
        found: Set[str] = set()
        stack = [entity_id]
        while stack:
            current = stack.pop()
            if current in found:
                continue
            found.add(current)
            entity = self.entities.get(current)
            if entity is not None and entity.anonymous:
                stack.extend(entity.operands)
        return found

    def signature(self, axiom: Axiom) -> Set[str]:
        """Named entities referenced by an axiom, including nested operands."""
        ids: Set[str] = set()
        for term in axiom.terms:
            ids |= self.expand(term)
        return {i for i in ids if not self.is_anonymous(i)}

    def anonymous_terms(self, axiom: Axiom) -> Set[str]:
        """Anonymous entities appearing directly as terms of an axiom."""
        return {t for t in axiom.terms if self.is_anonymous(t)}

    def referenced_ids(self) -> Set[str]:
        """Every entity id (named or anonymous) referenced by some axiom."""
        ids: Set[str] = set()
        for axiom in self.axioms:
            for term in axiom.terms:
                ids |= self.expand(term)
            for annotation in axiom.annotations:
                ids.add(annotation.property)
        return ids

    def trim_dangling(self) -> "Ontology":
        """Drop entity records no remaining axiom references. Axioms are kept."""
        referenced = self.referenced_ids()
        return Ontology(
            iri=self.iri,
            prefixes=dict(self.prefixes),
            entities={k: v for k, v in self.entities.items() if k in referenced},
            axioms=list(self.axioms),
        )

    def scope_blank_nodes(self, scope: str) -> "Ontology":
        """Rename blank node labels ``_:x`` to ``_:{scope}_x``.

        Blank node labels are local to one document; scoping them keeps
        graphs from different documents apart when they are merged.
        """

        def rename(entity_id: str) -> str:
            if entity_id.startswith(BLANK_NODE_PREFIX):
                return f"{BLANK_NODE_PREFIX}{scope}_{entity_id[len(BLANK_NODE_PREFIX):]}"
            return entity_id

        def rename_value(value: Optional[AnnotationValue]) -> Optional[AnnotationValue]:
            if value is None or value.kind != ValueKind.IRI:
                return value
            return value.model_copy(update={"value": rename(value.value)})

        entities = {}
        for entity in self.entities.values():
            renamed = entity.model_copy(
                update={"id": rename(entity.id), "operands": tuple(rename(o) for o in entity.operands)}
            )
            entities[renamed.id] = renamed
        axioms = [
            axiom.model_copy(
                update={
                    "terms": tuple(rename(t) for t in axiom.terms),
                    "value": rename_value(axiom.value),
                    "annotations": tuple(
                        a.model_copy(update={"value": rename_value(a.value)}) for a in axiom.annotations
                    ),
                }
            )
            for axiom in self.axioms
        ]
        return Ontology(iri=self.iri, prefixes=dict(self.prefixes), entities=entities, axioms=axioms)

    def axiom_set(self) -> Set[Axiom]:
        return set(self.axioms)

    def count(self) -> dict:
        """Count entity records and axioms.

        Returns:
            Dict with entity, anonymous entity and axiom counts.
        """
        anonymous = sum(1 for e in self.entities.values() if e.anonymous)
        return {
            "entities": len(self.entities) - anonymous,
            "anonymous_entities": anonymous,
            "axioms": len(self.axioms),
        }

    # -- TOML serialization -------------------------------------------------

    def to_toml(self) -> str:
        """Serialize the graph to a TOML string with compacted identifiers."""
        compact = PrefixMap(self.prefixes).compact
        referenced = self.referenced_ids()

        lines = []
        if self.iri:
            lines.append(f"iri = {_quote(self.iri)}")
            lines.append("")
        if self.prefixes:
            lines.append("[prefixes]")
            for prefix, namespace in self.prefixes.items():
                lines.append(f"{_quote(prefix)} = {_quote(namespace)}")
            lines.append("")

        for entity in self.entities.values():
            # Plain referenced records are recreated on load
            if entity.kind is None and not entity.anonymous and entity.id in referenced:
                continue
            lines.append("[[entities]]")
            lines.append(f"id = {_quote(compact(entity.id))}")
            if entity.kind:
                lines.append(f'kind = "{entity.kind.value}"')
            if entity.anonymous:
                lines.append("anonymous = true")
            if entity.expression:
                lines.append(f"expression = {_quote(entity.expression)}")
            if entity.operands:
                lines.append(f"operands = {_array(compact(o) for o in entity.operands)}")
            lines.append("")

        for axiom in self.axioms:
            lines.append("[[axioms]]")
            lines.append(f'type = "{axiom.axiom_type.value}"')
            lines.append(f"terms = {_array(compact(t) for t in axiom.terms)}")
            if axiom.value is not None:
                lines.append(f"value = {_inline_value(axiom.value, compact)}")
            if axiom.annotations:
                tables = [
                    _inline_value(a.value, compact, property=compact(a.property))
                    for a in axiom.annotations
                ]
                lines.append(f"annotations = [{', '.join(tables)}]")
            lines.append("")

        return "\n".join(lines)

    def save_toml(self, path: Path) -> None:
        """Save graph to TOML file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_toml())

    @classmethod
    def load_toml(cls, path: Path, prefixes: Optional[PrefixMap] = None) -> "Ontology":
        """Load graph from TOML file."""
        return cls.load_toml_string(path.read_text(), prefixes=prefixes)

    @classmethod
    def load_toml_string(cls, toml_str: str, prefixes: Optional[PrefixMap] = None) -> "Ontology":
        """Load graph from TOML string.

        Args:
            toml_str: Ontology document.
            prefixes: Extra prefixes used to expand identifiers. Prefixes
                declared in the document take precedence.

        Raises:
            OntologyFormatError: If the document is not valid TOML or a
                record is missing required keys or has values of the wrong
                type.
            UnresolvableIdentifier: If an identifier uses an unknown prefix.
        """
        try:
            data = tomllib.loads(toml_str)
        except tomllib.TOMLDecodeError as e:
            raise OntologyFormatError(f"Invalid ontology TOML: {e}") from e

        try:
            declared = data.get("prefixes", {})
            prefix_map = PrefixMap(prefixes.to_dict() if prefixes else None)
            for prefix, namespace in declared.items():
                prefix_map.add(prefix, namespace)
            resolve = prefix_map.resolve

            entities = [_entity_from_dict(r, resolve) for r in data.get("entities", [])]
            axioms = [_axiom_from_dict(r, resolve) for r in data.get("axioms", [])]
            return cls.build(axioms, entities, iri=data.get("iri"), prefixes=declared)
        except (ValidationError, AttributeError, TypeError) as e:
            # Records of the wrong shape, e.g. numbers where identifiers belong
            raise OntologyFormatError(f"Invalid ontology record: {e}") from e


def _quote(s: str) -> str:
    """Quote a string as a TOML basic string."""
    out = []
    for ch in s:
        if ch == "\\":
            out.append("\\\\")
        elif ch == '"':
            out.append('\\"')
        elif ch == "\n":
            out.append("\\n")
        elif ch == "\t":
            out.append("\\t")
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


def _array(values: Iterable[str]) -> str:
    return "[" + ", ".join(_quote(v) for v in values) + "]"


def _inline_value(value: AnnotationValue, compact, property: Optional[str] = None) -> str:
    pairs = []
    if property is not None:
        pairs.append(f"property = {_quote(property)}")
    if value.kind == ValueKind.IRI:
        pairs.append(f"iri = {_quote(compact(value.value))}")
    else:
        pairs.append(f"literal = {_quote(value.value)}")
        if value.language:
            pairs.append(f"language = {_quote(value.language)}")
        if value.datatype:
            pairs.append(f"datatype = {_quote(compact(value.datatype))}")
    return "{ " + ", ".join(pairs) + " }"


def _entity_from_dict(record: dict, resolve) -> Entity:
    if "id" not in record:
        raise OntologyFormatError(f"Entity record without id: {record!r}")
    kind = record.get("kind")
    if kind is not None and kind not in EntityKind._value2member_map_:
        raise OntologyFormatError(f"Unknown entity kind: {kind}")
    return Entity(
        id=resolve(record["id"]),
        kind=EntityKind(kind) if kind else None,
        anonymous=record.get("anonymous", record["id"].startswith(BLANK_NODE_PREFIX)),
        expression=record.get("expression"),
        operands=tuple(resolve(o) for o in record.get("operands", [])),
    )


def _axiom_from_dict(record: dict, resolve) -> Axiom:
    type_name = record.get("type")
    if type_name not in AxiomType._value2member_map_:
        raise OntologyFormatError(f"Unknown axiom type: {type_name}")
    terms = record.get("terms", [])
    if not terms:
        raise OntologyFormatError(f"{type_name} axiom without terms")
    return Axiom(
        axiom_type=AxiomType(type_name),
        terms=tuple(resolve(t) for t in terms),
        value=_value_from_dict(record["value"], resolve) if "value" in record else None,
        annotations=tuple(
            Annotation(
                property=resolve(_require(ann, "property")),
                value=_value_from_dict(ann, resolve),
            )
            for ann in record.get("annotations", [])
        ),
    )


def _value_from_dict(record: dict, resolve) -> AnnotationValue:
    if "iri" in record:
        return AnnotationValue(kind=ValueKind.IRI, value=resolve(record["iri"]))
    if "literal" in record:
        datatype = record.get("datatype")
        return AnnotationValue(
            kind=ValueKind.LITERAL,
            value=record["literal"],
            language=record.get("language"),
            datatype=resolve(datatype) if datatype else None,
        )
    raise OntologyFormatError(f"Annotation value needs 'iri' or 'literal': {record!r}")


def _require(record: dict, key: str):
    if key not in record:
        raise OntologyFormatError(f"Record without {key}: {record!r}")
    return record[key]
