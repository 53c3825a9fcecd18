"""House view assembly: scope, root, fragments and lineage gaps for one house."""

import logging

from fragments import detect_fragments
from graph import build_relationship_index
from lineage import get_lineage_gap_connections
from models import House, HouseView, Person, Relationship
from roots import find_root
from scoping import resolve_scope

logger = logging.getLogger(__name__)


def build_house_view(
    house_id,
    people: list[Person],
    houses: list[House],
    relationships: list[Relationship],
    include_cadets: bool = False,
    center_id=None,
) -> HouseView:
    """Compute everything a renderer needs to draw one house."""
    index = build_relationship_index(relationships)
    people_by_id = {p.id: p for p in people}

    scoped_ids = resolve_scope(house_id, people, houses, index, include_cadets)
    root_id = find_root(scoped_ids, people_by_id, index.parent_map, center_id)

    scoped_people = [p for p in people if p.id in scoped_ids]
    fragments = detect_fragments(scoped_people, index)
    lineage_gaps = get_lineage_gap_connections(fragments, relationships, people_by_id)

    if len(fragments) > 1:
        logger.info("Detected %d fragments in house %s", len(fragments), house_id)
        for i, frag in enumerate(fragments):
            root = frag.root_person
            logger.info(
                "  Fragment %d: %d members, root: %s (b. %s)",
                i + 1,
                frag.member_count,
                root.display_name,
                root.date_of_birth,
            )
        if lineage_gaps:
            logger.info("  %d lineage-gap connection(s) found", len(lineage_gaps))

    return HouseView(
        house_id=house_id,
        scoped_ids=scoped_ids,
        root_id=root_id,
        fragments=fragments,
        lineage_gaps=lineage_gaps,
    )


def build_all_house_views(
    people: list[Person],
    houses: list[House],
    relationships: list[Relationship],
    include_cadets: bool = False,
) -> dict:
    """House views for every house, keyed by house id."""
    return {
        house.id: build_house_view(house.id, people, houses, relationships, include_cadets)
        for house in houses
    }
