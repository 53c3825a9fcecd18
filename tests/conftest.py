"""Pytest configuration to make the flat modules under src/ importable.

This mirrors how ``src/main.py`` imports its siblings (``from models import
...``) when tests are run from the repository root or other locations.
"""

import os
import sys

import pytest

# Project root = parent directory of this tests/ folder
SRC_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")

if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from models import LINEAGE_GAP, PARENT_CHILD, SPOUSAL, House, Person, Relationship  # noqa: E402


def spouse(a, b) -> Relationship:
    return Relationship(a, b, SPOUSAL)


def child_of(child, parent) -> Relationship:
    return Relationship(child, parent, PARENT_CHILD)


def gap(descendant, ancestor) -> Relationship:
    return Relationship(descendant, ancestor, LINEAGE_GAP)


@pytest.fixture
def small_family():
    """A(900) + B(920) with child C(945) in house H1; unrelated D(1000) in H2."""
    people = [
        Person("A", house_id="H1", date_of_birth="900"),
        Person("B", house_id="H1", date_of_birth="920"),
        Person("C", house_id="H1", date_of_birth="945"),
        Person("D", house_id="H2", date_of_birth="1000"),
    ]
    houses = [House("H1"), House("H2")]
    relationships = [
        spouse("A", "B"),
        child_of("C", "A"),
        child_of("C", "B"),
    ]
    return people, houses, relationships
