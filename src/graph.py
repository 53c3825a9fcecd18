"""Relationship index and NetworkX graph building."""

from dataclasses import dataclass, field

import networkx as nx

from models import LINEAGE_GAP, PARENT_CHILD, SPOUSAL, Person, Relationship


@dataclass
class RelationshipIndex:
    """
    Lookup maps derived from a relationship list.

    spouse_map: person -> set of spouses
    parent_map: child -> set of parents
    children_map: parent -> set of children
    """

    spouse_map: dict = field(default_factory=dict)
    parent_map: dict = field(default_factory=dict)
    children_map: dict = field(default_factory=dict)

    def spouses_of(self, person_id) -> set:
        return self.spouse_map.get(person_id, set())

    def parents_of(self, person_id) -> set:
        return self.parent_map.get(person_id, set())

    def children_of(self, person_id) -> set:
        return self.children_map.get(person_id, set())

    def has_parents(self, person_id) -> bool:
        return bool(self.parent_map.get(person_id))


def build_relationship_index(relationships: list[Relationship]) -> RelationshipIndex:
    """
    Build spouse/parent/children maps from a flat relationship list.

    People are not checked against any person list. Lineage-gap edges are
    left out: they never connect people for scoping or fragments.
    """
    index = RelationshipIndex()

    for rel in relationships:
        if rel.relationship_type == SPOUSAL:
            index.spouse_map.setdefault(rel.person1_id, set()).add(rel.person2_id)
            index.spouse_map.setdefault(rel.person2_id, set()).add(rel.person1_id)
        elif rel.relationship_type == PARENT_CHILD:
            child_id, parent_id = rel.person1_id, rel.person2_id
            index.parent_map.setdefault(child_id, set()).add(parent_id)
            index.children_map.setdefault(parent_id, set()).add(child_id)

    return index


def build_graph(people: list[Person], relationships: list[Relationship]) -> nx.DiGraph:
    """
    Build a NetworkX directed graph of the whole dataset.

    Parent-child edges run parent -> child. Spousal and lineage-gap edges keep
    the stored person1 -> person2 direction. Endpoints missing from `people`
    become bare nodes with no attributes.
    """
    G = nx.DiGraph()

    for p in people:
        G.add_node(
            p.id,
            person_name=p.display_name,
            house_id=p.house_id,
            birth_date=p.date_of_birth,
            death_date=p.date_of_death,
        )

    for rel in relationships:
        if rel.relationship_type == PARENT_CHILD:
            G.add_edge(rel.person2_id, rel.person1_id, relationship_type=PARENT_CHILD)
        elif rel.relationship_type in (SPOUSAL, LINEAGE_GAP):
            G.add_edge(rel.person1_id, rel.person2_id, relationship_type=rel.relationship_type)

    return G


def build_kinship_graph(population: list[Person], index: RelationshipIndex) -> nx.Graph:
    """
    Build the undirected spouse/parent/child graph over a population.

    Edges leading to people outside the population are dropped.
    """
    G = nx.Graph()
    member_ids = {p.id for p in population}
    G.add_nodes_from(p.id for p in population)

    for person_id in member_ids:
        neighbours = (
            index.spouses_of(person_id)
            | index.parents_of(person_id)
            | index.children_of(person_id)
        )
        for other_id in neighbours:
            if other_id in member_ids and other_id != person_id:
                G.add_edge(person_id, other_id)

    return G
