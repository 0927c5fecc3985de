#!/usr/bin/env python3
# Ontofilter - Axiom selection for ontology graphs
# Copyright (c) 2025 Matt Varendorff
# SPDX-License-Identifier: BSL-1.0

"""Filter ontology axioms with chained select clauses.

Usage:
    # Keep axioms about a class and its ancestors
    python scripts/filter_ontology.py -i pizza.toml -e ex:Margherita -s "self ancestors" -o out.toml

    # Keep only ABox axioms, under a new ontology IRI
    python scripts/filter_ontology.py -i pizza.toml --axioms a_box -O http://example.org/pizza-abox

    # Drop everything that mentions a class, keep the rest
    python scripts/filter_ontology.py -i pizza.toml -e ex:Pizza -s complement

    # Select by annotation, then narrow to subclass axioms
    python scripts/filter_ontology.py -i pizza.toml -s "rdfs:label='pizza'" -a subclassof
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from ontofilter.errors import OntofilterError
from ontofilter.models import Ontology, PrefixMap
from ontofilter.selection import FilterOptions, FilterPipeline, read_term_file

logger = logging.getLogger(__name__)


def parse_bool(value: str) -> bool:
    """Parse a true/false option value."""
    lowered = value.strip().lower()
    if lowered in ("true", "yes", "1"):
        return True
    if lowered in ("false", "no", "0"):
        return False
    raise argparse.ArgumentTypeError(f"{value} is not a valid boolean (use true or false)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Filter ontology axioms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        required=True,
        help="Ontology TOML file to filter",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Output TOML file (default: print to stdout)",
    )
    parser.add_argument(
        "--output-iri",
        "-O",
        help="Ontology IRI of the output (default: the input ontology IRI)",
    )
    parser.add_argument(
        "--entity",
        "-e",
        action="append",
        default=[],
        help="Seed entity CURIE or IRI (repeatable, default: all entities)",
    )
    parser.add_argument(
        "--entities",
        "-E",
        type=Path,
        action="append",
        default=[],
        help="File of seed entities, one per line",
    )
    parser.add_argument(
        "--select",
        "-s",
        action="append",
        default=[],
        help="Select clause, applied in order (repeatable, default: self)",
    )
    parser.add_argument(
        "--axioms",
        "-a",
        action="append",
        default=[],
        help="Axiom types to keep, '+'-joinable (default: all)",
    )
    parser.add_argument(
        "--trim",
        "-t",
        type=parse_bool,
        default=True,
        help="If true, trim dangling entities (default: true)",
    )
    parser.add_argument(
        "--prefix",
        "-p",
        action="append",
        default=[],
        help='Extra prefix, e.g. "ex: http://example.org/"',
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Set up logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if not args.input.exists():
        logger.error(f"Input file not found: {args.input}")
        return 1

    try:
        entities = list(args.entity)
        for term_file in args.entities:
            entities.extend(read_term_file(term_file))

        prefixes = PrefixMap()
        prefixes.add_declarations(args.prefix)

        logger.info(f"Loading ontology from {args.input}...")
        ontology = Ontology.load_toml(args.input, prefixes=prefixes)
        logger.info(f"Loaded {ontology.count()}")

        options = FilterOptions(
            entities=entities,
            selects=args.select,
            axioms=args.axioms,
            trim=args.trim,
            prefixes=args.prefix,
            output_iri=args.output_iri,
        )
        result = FilterPipeline(options).run(ontology)

        if args.output:
            result.save_toml(args.output)
            logger.info(f"Saved {len(result.axioms)} axioms to {args.output}")
        else:
            sys.stdout.write(result.to_toml())

        return 0

    except OntofilterError as e:
        logger.error(f"Error: {e}")
        return 1
    except OSError as e:
        logger.error(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
