#!/usr/bin/env python3
# Ontofilter - Axiom selection for ontology graphs
# Copyright (c) 2025 Matt Varendorff
# SPDX-License-Identifier: BSL-1.0

"""Ingest ontology TOML files into Neo4j.

Usage:
    python scripts/ingest.py filtered.toml               # Load one file
    python scripts/ingest.py --clear a.toml b.toml       # Clear the database first
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from ontofilter.errors import OntofilterError
from ontofilter.graph import Neo4jLoader, apply_schema, clear_graph
from ontofilter.models import Ontology
from ontofilter.selection import merge


def main(argv: list[str] | None = None) -> int:
    """Ingest TOML files into Neo4j."""
    parser = argparse.ArgumentParser(description="Ingest ontology TOML files")
    parser.add_argument(
        "files",
        type=Path,
        nargs="+",
        help="Ontology TOML files to ingest",
    )
    parser.add_argument(
        "--clear",
        action="store_true",
        help="Clear the database before loading",
    )
    parser.add_argument(
        "--neo4j-uri",
        default="bolt://localhost:7687",
        help="Neo4j bolt URI",
    )
    parser.add_argument(
        "--neo4j-user",
        default="neo4j",
        help="Neo4j username",
    )
    parser.add_argument(
        "--neo4j-password",
        default="ontofilterpass",
        help="Neo4j password",
    )

    args = parser.parse_args(argv)

    ontologies = []
    for toml_file in args.files:
        if not toml_file.exists():
            print(f"Warning: File not found: {toml_file}")
            continue

        print(f"Loading {toml_file}...")
        try:
            ontology = Ontology.load_toml(toml_file)
        except OntofilterError as e:
            print(f"Error: {toml_file}: {e}")
            return 1
        counts = ontology.count()
        print(f"  - {counts['axioms']} axioms, {counts['entities']} entities")
        ontologies.append(ontology)

    if not ontologies:
        print("Nothing to load")
        return 1

    if len(ontologies) > 1:
        # Blank node labels only mean something inside their own file
        ontologies = [o.scope_blank_nodes(f"f{n}") for n, o in enumerate(ontologies, start=1)]
    combined = merge(*ontologies)
    print(f"\nTotal: {len(combined.axioms)} axioms, {len(combined.entities)} entity records")

    print(f"\nLoading into Neo4j ({args.neo4j_uri})...")
    with Neo4jLoader(
        args.neo4j_uri,
        args.neo4j_user,
        args.neo4j_password,
    ) as loader:
        if args.clear:
            clear_graph(loader.driver)
            print("  Neo4j cleared")
        apply_schema(loader.driver)
        loader.load_ontology(combined)
        counts = loader.count_nodes()
        print(f"  - Loaded {counts['axioms']} axioms")
        print(f"  - Loaded {counts['entities']} entities")

    print("\nDone!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
