"""Dataset loading and birth-year handling utilities."""

from pathlib import Path
import json
import logging
import re

from models import (
    LINEAGE_GAP,
    PARENT_CHILD,
    SPOUSAL,
    House,
    Person,
    Relationship,
)

logger = logging.getLogger(__name__)


# Relationship kinds seen in exported datasets, mapped onto the closed set.
# Legacy "parent" kinds store the parent in person1 and get flipped.
KIND_MAP = {
    "spousal": (SPOUSAL, False),
    "spouse": (SPOUSAL, False),
    "parent-child": (PARENT_CHILD, False),
    "parent": (PARENT_CHILD, True),
    "adopted-parent": (PARENT_CHILD, True),
    "lineage-gap": (LINEAGE_GAP, False),
}

_QUALIFIER_RE = re.compile(
    r"^(ABT\.?|ABOUT|BEF\.?|BEFORE|AFT\.?|AFTER|EST\.?|CAL\.?|CIRCA|CA\.|C\.|AROUND):?\s*",
    flags=re.IGNORECASE,
)
_LEADING_INT_RE = re.compile(r"^[+-]?\d+")


def parse_birth_year(token: str | int | None) -> int | None:
    """
    Read the year out of a birth-year token.
    Returns None if the token has no leading number.

    Handles tokens like:
    - "900"
    - "1245-03-15"
    - "ABT 1100"
    - "(c. 1020)"
    - "1789?"
    - "unknown" (None)
    """
    if token is None:
        return None
    if isinstance(token, int):
        return token

    s = str(token).strip().strip("()").strip()
    s = _QUALIFIER_RE.sub("", s).strip()
    if not s:
        return None

    match = _LEADING_INT_RE.match(s)
    if not match:
        return None
    return int(match.group(0))


def birth_order_key(person: Person) -> tuple:
    """Sort key: numeric birth years ascending, unknown years last, ties by id."""
    year = parse_birth_year(person.date_of_birth)
    return (year is None, year if year is not None else 0, str(person.id))


def sort_by_birth(people) -> list[Person]:
    return sorted(people, key=birth_order_key)


def coerce_id(value):
    """Turn numeric-string ids into ints; leave anything else untouched."""
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return value


def _optional_str(value) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def _optional_int(value) -> int | None:
    """Read a whole number the way parseInt would; None when there is none."""
    if isinstance(value, int):
        return value
    if value is None:
        return None
    match = _LEADING_INT_RE.match(str(value).strip())
    return int(match.group(0)) if match else None


def normalize_data(payload: dict) -> tuple[list[Person], list[House], list[Relationship]]:
    """
    Extract people, houses and relationships from an exported dataset.
    Relationships of unknown kind, or with a missing endpoint, are skipped.
    """
    if not isinstance(payload, dict):
        raise ValueError("dataset JSON must be an object")

    people: list[Person] = []
    houses: list[House] = []
    relationships: list[Relationship] = []

    for rec in payload.get("houses", []):
        if rec.get("id") is None:
            continue
        houses.append(
            House(
                id=coerce_id(rec["id"]),
                parent_house_id=coerce_id(rec.get("parentHouseId")),
                house_name=rec.get("houseName"),
            )
        )

    for rec in payload.get("people", []):
        if rec.get("id") is None:
            continue
        people.append(
            Person(
                id=coerce_id(rec["id"]),
                house_id=coerce_id(rec.get("houseId")),
                date_of_birth=_optional_str(rec.get("dateOfBirth")),
                date_of_death=_optional_str(rec.get("dateOfDeath")),
                first_name=rec.get("firstName"),
                last_name=rec.get("lastName"),
            )
        )

    skipped = 0
    for rec in payload.get("relationships", []):
        kind = str(rec.get("relationshipType", "")).strip().lower()
        person1_id = coerce_id(rec.get("person1Id"))
        person2_id = coerce_id(rec.get("person2Id"))

        if kind not in KIND_MAP or person1_id is None or person2_id is None:
            skipped += 1
            continue

        relationship_type, flip = KIND_MAP[kind]
        if flip:
            person1_id, person2_id = person2_id, person1_id

        estimated_generations = None
        lineage_notes = None
        if relationship_type == LINEAGE_GAP:
            estimated_generations = _optional_int(rec.get("estimatedGenerations"))
            lineage_notes = _optional_str(rec.get("lineageNotes"))

        relationships.append(
            Relationship(
                person1_id=person1_id,
                person2_id=person2_id,
                relationship_type=relationship_type,
                estimated_generations=estimated_generations,
                lineage_notes=lineage_notes,
            )
        )

    if skipped:
        logger.warning("Skipped %d relationship(s) with unknown kind or missing endpoint", skipped)

    return people, houses, relationships


def load_json(filepath: Path) -> tuple[list[Person], list[House], list[Relationship]]:
    """Load an exported dataset from a JSON file."""
    try:
        payload = json.loads(Path(filepath).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid dataset JSON in {filepath}: {exc}") from exc
    return normalize_data(payload)
