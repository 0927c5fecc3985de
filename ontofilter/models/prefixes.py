# Ontofilter - Axiom selection for ontology graphs
# Copyright (c) 2025 Matt Varendorff
# SPDX-License-Identifier: BSL-1.0

"""CURIE expansion and compaction."""

import re
from typing import Dict, Iterable, Optional

from ontofilter.errors import UnresolvableIdentifier

DEFAULT_PREFIXES: Dict[str, str] = {
    "rdf": "http://www.w3.org/1999/02/22-rdf-syntax-ns#",
    "rdfs": "http://www.w3.org/2000/01/rdf-schema#",
    "owl": "http://www.w3.org/2002/07/owl#",
    "xsd": "http://www.w3.org/2001/XMLSchema#",
    "obo": "http://purl.obolibrary.org/obo/",
    "oboInOwl": "http://www.geneontology.org/formats/oboInOwl#",
    "dc": "http://purl.org/dc/elements/1.1/",
    "dcterms": "http://purl.org/dc/terms/",
    "skos": "http://www.w3.org/2004/02/skos/core#",
}

# scheme://... or urn:...
_ABSOLUTE_IRI = re.compile(r"^(?:[A-Za-z][A-Za-z0-9+.\-]*://|urn:)\S+$")

BLANK_NODE_PREFIX = "_:"

# OBO-style CURIEs such as GO:0008150 expand into the obo namespace
_OBO_CURIE = re.compile(r"^[A-Z][A-Za-z]*:\d+$")


class PrefixMap:
    """Prefix table used to turn CURIEs into full IRIs and back."""

    def __init__(self, prefixes: Optional[Dict[str, str]] = None, defaults: bool = True) -> None:
        self.prefixes: Dict[str, str] = dict(DEFAULT_PREFIXES) if defaults else {}
        if prefixes:
            self.prefixes.update(prefixes)

    def add(self, prefix: str, namespace: str) -> None:
        self.prefixes[prefix] = namespace

    def add_declarations(self, declarations: Iterable[str]) -> None:
        """Add prefixes written as ``"ex: http://example.org/"``.

        Raises:
            UnresolvableIdentifier: If a declaration is malformed.
        """
        for declaration in declarations:
            prefix, sep, namespace = declaration.partition(":")
            namespace = namespace.strip()
            if not sep or not prefix.strip() or not _ABSOLUTE_IRI.match(namespace):
                raise UnresolvableIdentifier(declaration)
            self.add(prefix.strip(), namespace)

    def resolve(self, term: str) -> str:
        """Expand a CURIE, bracketed IRI, full IRI or blank node label.

        Args:
            term: Identifier as typed by the user or stored in a file.

        Returns:
            The full IRI (blank node labels are returned unchanged).

        Raises:
            UnresolvableIdentifier: If the prefix is unknown or the term is
                not an identifier at all.
        """
        text = term.strip()
        if text.startswith("<") and text.endswith(">"):
            inner = text[1:-1].strip()
            if _ABSOLUTE_IRI.match(inner):
                return inner
            raise UnresolvableIdentifier(term)
        if text.startswith(BLANK_NODE_PREFIX) and len(text) > 2 and not any(c.isspace() for c in text):
            return text
        if _ABSOLUTE_IRI.match(text):
            return text
        if not text or any(c.isspace() for c in text) or ":" not in text:
            raise UnresolvableIdentifier(term)
        prefix, local = text.split(":", 1)
        namespace = self.prefixes.get(prefix)
        if namespace is None:
            if _OBO_CURIE.match(text) and "obo" in self.prefixes:
                return f"{self.prefixes['obo']}{prefix}_{local}"
            raise UnresolvableIdentifier(term)
        return namespace + local

    def compact(self, iri: str) -> str:
        """Shorten an IRI with the longest matching namespace, if any."""
        best: Optional[str] = None
        best_len = 0
        for prefix, namespace in self.prefixes.items():
            if iri.startswith(namespace) and len(namespace) > best_len and len(iri) > len(namespace):
                best, best_len = prefix, len(namespace)
        if best is None:
            return iri
        return f"{best}:{iri[best_len:]}"

    def to_dict(self) -> Dict[str, str]:
        return dict(self.prefixes)
