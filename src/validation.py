"""Data health checks for house and family data."""

from graph import build_graph
from models import PARENT_CHILD, SPOUSAL, House, Person, Relationship
from parsing import parse_birth_year


def validate_data(
    people: list[Person], houses: list[House], relationships: list[Relationship]
) -> list[str]:
    """
    Check the dataset for:
    - Relationships pointing at unknown people
    - Houses pointing at an unknown parent house
    - Impossible ages (child born before parent)
    - Death before birth
    - People with more than one recorded spouse

    Returns a list of warning messages. Nothing here raises; bad data is
    still drawn, just less completely.
    """
    warnings: list[str] = []

    G = build_graph(people, relationships)
    person_ids = {p.id for p in people}
    house_ids = {h.id for h in houses}

    # Dangling references become attribute-less nodes in the graph
    for node in G.nodes:
        if node not in person_ids:
            warnings.append(f"Unknown person {node} referenced by a relationship")

    for house in houses:
        if house.parent_house_id is not None and house.parent_house_id not in house_ids:
            warnings.append(
                f"House {house.house_name or house.id} has unknown parent house "
                f"{house.parent_house_id}"
            )

    # Check for impossible ages (child born before parent)
    for parent, child, data in G.edges(data=True):
        if data.get("relationship_type") != PARENT_CHILD:
            continue

        parent_data = G.nodes[parent]
        child_data = G.nodes[child]

        parent_year = parse_birth_year(parent_data.get("birth_date"))
        child_year = parse_birth_year(child_data.get("birth_date"))

        if parent_year is not None and child_year is not None and child_year < parent_year:
            warnings.append(
                f"Impossible: {child_data.get('person_name')} born before parent "
                f"{parent_data.get('person_name')}"
            )

    # Check death before birth
    for _, data in G.nodes(data=True):
        birth = parse_birth_year(data.get("birth_date"))
        death = parse_birth_year(data.get("death_date"))

        if birth is not None and death is not None and death < birth:
            warnings.append(f"Impossible: {data.get('person_name')} died before being born")

    # Multiple spouses are kept, but the renderer draws one couple per person
    spouses_of: dict = {}
    for rel in relationships:
        if rel.relationship_type == SPOUSAL:
            spouses_of.setdefault(rel.person1_id, set()).add(rel.person2_id)
            spouses_of.setdefault(rel.person2_id, set()).add(rel.person1_id)

    for person in people:
        if len(spouses_of.get(person.id, ())) > 1:
            warnings.append(
                f"{person.display_name} has {len(spouses_of[person.id])} recorded spouses"
            )

    return warnings
