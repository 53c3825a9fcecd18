"""Fragment detection: disconnected family branches within a population."""

import logging

import networkx as nx

from graph import RelationshipIndex, build_kinship_graph
from models import Fragment, Person
from parsing import birth_order_key

logger = logging.getLogger(__name__)


def pick_fragment_root(members: list[Person], index: RelationshipIndex) -> Person:
    """Earliest-born member without a recorded parent, else earliest-born member."""
    root_candidates = [p for p in members if not index.has_parents(p.id)]
    if root_candidates:
        return min(root_candidates, key=birth_order_key)
    return min(members, key=birth_order_key)


def detect_fragments(population: list[Person], index: RelationshipIndex) -> list[Fragment]:
    """
    Split a population into connected groups under spouse/parent/child edges.

    Only edges between members of `population` count, so a fragment never
    reaches outside it. Every person lands in exactly one fragment.

    Args:
        population: The people to split, usually a house-scoped set
        index: Relationship index for the dataset

    Returns:
        Fragments sorted by their root person's birth year
    """
    if not population:
        return []

    # First record wins if an id is repeated
    unique: dict = {}
    for person in population:
        unique.setdefault(person.id, person)
    people = list(unique.values())

    G = build_kinship_graph(people, index)

    fragments: list[Fragment] = []
    for component in nx.connected_components(G):
        members = [p for p in people if p.id in component]
        fragments.append(
            Fragment(
                people_ids=frozenset(component),
                root_person=pick_fragment_root(members, index),
                member_count=len(component),
                members=members,
            )
        )

    fragments.sort(key=lambda frag: birth_order_key(frag.root_person))

    logger.debug("Detected %d fragment(s) in %d people", len(fragments), len(people))
    return fragments
