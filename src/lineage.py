"""Lineage gaps: soft links between otherwise disconnected fragments."""

from models import LINEAGE_GAP, Fragment, LineageGapConnection, Relationship


def get_lineage_gap_connections(
    fragments: list[Fragment], relationships: list[Relationship], people_by_id: dict
) -> list[LineageGapConnection]:
    """
    Find lineage-gap relationships that bridge two different fragments.

    A lineage gap joining two people in the same fragment is not a bridge and
    is dropped. Fragments are never merged.
    """
    fragment_of: dict = {}
    for i, frag in enumerate(fragments):
        for person_id in frag.people_ids:
            fragment_of[person_id] = i

    connections: list[LineageGapConnection] = []

    for rel in relationships:
        if rel.relationship_type != LINEAGE_GAP:
            continue

        descendant = people_by_id.get(rel.person1_id)
        ancestor = people_by_id.get(rel.person2_id)
        if descendant is None or ancestor is None:
            continue

        descendant_fragment = fragment_of.get(rel.person1_id)
        ancestor_fragment = fragment_of.get(rel.person2_id)
        if descendant_fragment is None or ancestor_fragment is None:
            continue
        if descendant_fragment == ancestor_fragment:
            continue

        connections.append(
            LineageGapConnection(
                relationship=rel,
                descendant=descendant,
                ancestor=ancestor,
                descendant_fragment_index=descendant_fragment,
                ancestor_fragment_index=ancestor_fragment,
            )
        )

    return connections
