"""Root selection and generation layering for hierarchical rendering."""

import logging

from graph import RelationshipIndex
from parsing import birth_order_key

logger = logging.getLogger(__name__)

AUTO = "auto"


def find_root(scoped_ids, people_by_id: dict, parent_map: dict, explicit_center_id=None):
    """
    Find the root person for a house view or fragment.

    An explicit center in scope always wins. Otherwise the oldest scoped
    person without recorded parents is used, falling back to the oldest
    scoped person overall.

    Args:
        scoped_ids: Person ids in scope
        people_by_id: Person records by id; ids missing here are ignored
        parent_map: child id -> parent ids
        explicit_center_id: Person to center on, or None / "auto"

    Returns:
        A person id, or None when nothing is in scope
    """
    if explicit_center_id not in (None, AUTO) and explicit_center_id in scoped_ids:
        return explicit_center_id

    scoped_people = [people_by_id[pid] for pid in scoped_ids if pid in people_by_id]
    if not scoped_people:
        return None

    root_candidates = [p for p in scoped_people if not parent_map.get(p.id)]
    if root_candidates:
        return min(root_candidates, key=birth_order_key).id

    return min(scoped_people, key=birth_order_key).id


def detect_generations(people_by_id: dict, index: RelationshipIndex, root_id=None) -> list[list]:
    """
    Layer people into generations below a root.

    Generation 0 is the root. Each following generation holds the unplaced
    children of the previous one and of their spouses. Only people in
    `people_by_id` are placed; the root's spouses count as placed.
    """
    if root_id is None or root_id not in people_by_id:
        root_id = find_root(people_by_id.keys(), people_by_id, index.parent_map)
        if root_id is None or index.has_parents(root_id):
            logger.debug("No root people found (everyone has parents)")
            return []

    generations: list[list] = [[root_id]]
    processed = {root_id} | index.spouses_of(root_id)

    current = 0
    while current < len(generations):
        next_gen = []
        for person_id in generations[current]:
            children = set(index.children_of(person_id))
            for spouse_id in index.spouses_of(person_id):
                if spouse_id in people_by_id:
                    children |= index.children_of(spouse_id)

            for child_id in children:
                if child_id in people_by_id and child_id not in processed:
                    next_gen.append(people_by_id[child_id])
                    processed.add(child_id)

        if next_gen:
            next_gen.sort(key=birth_order_key)
            generations.append([p.id for p in next_gen])
        current += 1

    return generations
