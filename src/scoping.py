"""House scoping: which people are visible when viewing a house."""

import logging

from graph import RelationshipIndex
from models import House, Person
from parsing import sort_by_birth

logger = logging.getLogger(__name__)


def get_house_ids_in_scope(target_house_id, houses: list[House], include_cadets: bool) -> set:
    """
    Get the house ids in scope for a target house.

    With `include_cadets`, houses whose parent is the target are added. Only
    one level is pulled in: cadets of cadets stay out.
    """
    house_ids = {target_house_id}

    if include_cadets:
        for house in houses:
            if house.parent_house_id == target_house_id:
                house_ids.add(house.id)

    return house_ids


def get_house_members(
    target_house_id, people: list[Person], houses: list[House], include_cadets: bool = False
) -> list[Person]:
    """Direct members of the house (and cadets, if requested), oldest first."""
    house_ids = get_house_ids_in_scope(target_house_id, houses, include_cadets)
    return sort_by_birth(p for p in people if p.house_id in house_ids)


def resolve_scope(
    target_house_id,
    people: list[Person],
    houses: list[House],
    index: RelationshipIndex,
    include_cadets: bool = False,
) -> set:
    """
    Get all person ids that should be visible when viewing a house.

    Includes:
    - Direct house members
    - Spouses of anyone included
    - Ancestors of house members; the walk goes on past a parent only if that
      parent is a house member, so the first outside parent is still shown
    - Descendants of house members; only house members expand their children

    Args:
        target_house_id: The house being viewed
        people: Every known person
        houses: Every known house
        index: Relationship index built from the same dataset
        include_cadets: Also treat direct cadet houses as members

    Returns:
        The set of visible person ids
    """
    house_ids = get_house_ids_in_scope(target_house_id, houses, include_cadets)
    people_by_id = {p.id: p for p in people}
    scoped_ids: set = set()

    def is_house_member(person_id) -> bool:
        person = people_by_id.get(person_id)
        return person is not None and person.house_id in house_ids

    def add_with_spouses(person_id):
        # Spouses are closed over so remarriages stay visible too
        stack = [person_id]
        while stack:
            current = stack.pop()
            scoped_ids.add(current)
            for spouse_id in index.spouses_of(current):
                if spouse_id not in scoped_ids:
                    stack.append(spouse_id)

    def find_ancestors(start_id):
        visited: set = set()
        stack = [start_id]
        while stack:
            person_id = stack.pop()
            if person_id in visited:
                continue
            visited.add(person_id)
            if person_id not in people_by_id:
                continue

            for parent_id in index.parents_of(person_id):
                add_with_spouses(parent_id)
                if is_house_member(parent_id):
                    stack.append(parent_id)

    def find_descendants(start_id):
        visited: set = set()
        stack = [start_id]
        while stack:
            person_id = stack.pop()
            if person_id in visited:
                continue
            visited.add(person_id)
            if not is_house_member(person_id):
                continue

            for child_id in index.children_of(person_id):
                add_with_spouses(child_id)
                stack.append(child_id)

    direct_members = [p.id for p in people if p.house_id in house_ids]

    for person_id in direct_members:
        add_with_spouses(person_id)

    for person_id in direct_members:
        find_ancestors(person_id)

    for person_id in direct_members:
        find_descendants(person_id)

    # House members picked up along the way may have unexplored descendants
    for person_id in list(scoped_ids):
        if is_house_member(person_id):
            find_descendants(person_id)

    logger.debug(
        "House %s scope: %d direct member(s), %d visible",
        target_house_id,
        len(direct_members),
        len(scoped_ids),
    )
    return scoped_ids
