"""Pytest fixtures for Ontofilter tests."""

import pytest

from ontofilter.models import Axiom, AxiomType, Ontology

EX = "http://example.org/pizza#"
RDFS_LABEL = "http://www.w3.org/2000/01/rdf-schema#label"

PIZZA_TOML = """
iri = "http://example.org/pizza"

[prefixes]
ex = "http://example.org/pizza#"

[[entities]]
id = "ex:Food"
kind = "class"

[[entities]]
id = "ex:Pizza"
kind = "class"

[[entities]]
id = "ex:NamedPizza"
kind = "class"

[[entities]]
id = "ex:Margherita"
kind = "class"

[[entities]]
id = "ex:Topping"
kind = "class"

[[entities]]
id = "ex:CheeseTopping"
kind = "class"

[[entities]]
id = "ex:Mozzarella"
kind = "class"

[[entities]]
id = "ex:Unused"
kind = "class"

[[entities]]
id = "ex:hasTopping"
kind = "object_property"

[[entities]]
id = "ex:myPizza"
kind = "named_individual"

[[entities]]
id = "_:someCheese"
kind = "class"
anonymous = true
expression = "ObjectSomeValuesFrom"
operands = ["ex:hasTopping", "ex:CheeseTopping"]

[[axioms]]
type = "SubClassOf"
terms = ["ex:Pizza", "ex:Food"]

[[axioms]]
type = "SubClassOf"
terms = ["ex:NamedPizza", "ex:Pizza"]

[[axioms]]
type = "SubClassOf"
terms = ["ex:Margherita", "ex:NamedPizza"]

[[axioms]]
type = "SubClassOf"
terms = ["ex:Margherita", "_:someCheese"]

[[axioms]]
type = "SubClassOf"
terms = ["ex:CheeseTopping", "ex:Topping"]

[[axioms]]
type = "SubClassOf"
terms = ["ex:Mozzarella", "ex:CheeseTopping"]

[[axioms]]
type = "ObjectPropertyDomain"
terms = ["ex:hasTopping", "ex:Pizza"]

[[axioms]]
type = "ObjectPropertyRange"
terms = ["ex:hasTopping", "ex:Topping"]

[[axioms]]
type = "ClassAssertion"
terms = ["ex:Margherita", "ex:myPizza"]

[[axioms]]
type = "AnnotationAssertion"
terms = ["rdfs:label", "ex:Pizza"]
value = { literal = "pizza" }

[[axioms]]
type = "AnnotationAssertion"
terms = ["rdfs:label", "ex:Margherita"]
value = { literal = "margherita" }

[[axioms]]
type = "EquivalentClasses"
terms = ["ex:Pizza", "ex:Pie"]

[[axioms]]
type = "FunctionalObjectProperty"
terms = ["ex:hasTopping"]
"""


def ex(name: str) -> str:
    """Full IRI of a term in the example namespace."""
    return EX + name


def subclass(sub: str, sup: str) -> Axiom:
    return Axiom(axiom_type=AxiomType.SUBCLASS_OF, terms=(sub, sup))


def find_axiom(ontology: Ontology, axiom_type: AxiomType, *terms: str) -> Axiom:
    """Look up the axiom with the given type and terms."""
    for axiom in ontology.axioms:
        if axiom.axiom_type == axiom_type and axiom.terms == terms:
            return axiom
    raise LookupError(f"{axiom_type.value}{terms} not in ontology")


@pytest.fixture
def abc_ontology() -> Ontology:
    """Entities A, B, C with SubClassOf(A, B) and SubClassOf(B, C)."""
    return Ontology.build([subclass(ex("A"), ex("B")), subclass(ex("B"), ex("C"))])


@pytest.fixture
def pizza_ontology() -> Ontology:
    """Small pizza ontology with one anonymous class expression."""
    return Ontology.load_toml_string(PIZZA_TOML)
