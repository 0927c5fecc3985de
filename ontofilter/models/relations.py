# Ontofilter - Axiom selection for ontology graphs
# Copyright (c) 2025 Matt Varendorff
# SPDX-License-Identifier: BSL-1.0

"""Relation types used to expand a seed entity into related entities."""

from enum import Enum
from typing import Optional


class RelationType(str, Enum):
    """Ways of reaching related entities from a seed entity."""

    SELF = "self"  # the seed itself
    PARENTS = "parents"  # direct superclasses / superproperties
    ANCESTORS = "ancestors"  # transitive parents
    CHILDREN = "children"  # direct subclasses / subproperties
    DESCENDANTS = "descendants"  # transitive children
    EQUIVALENTS = "equivalents"
    TYPES = "types"  # classes an individual is asserted to be
    INSTANCES = "instances"  # individuals asserted to be of a class
    DOMAINS = "domains"  # property domains
    RANGES = "ranges"  # property ranges

    @classmethod
    def from_token(cls, token: str) -> Optional["RelationType"]:
        """Parse a relation name case-insensitively.

        Returns:
            The matching RelationType, or None if the token names no relation.
        """
        return cls._value2member_map_.get(token.strip().lower())
