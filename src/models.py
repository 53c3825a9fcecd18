"""Data classes for house, person and relationship records."""

from dataclasses import dataclass, field

PersonId = int | str
HouseId = int | str

# Relationship kinds
SPOUSAL = "spousal"
PARENT_CHILD = "parent-child"  # person1 = child, person2 = parent
LINEAGE_GAP = "lineage-gap"  # person1 = descendant side, person2 = ancestor side

RELATIONSHIP_TYPES = (SPOUSAL, PARENT_CHILD, LINEAGE_GAP)


@dataclass(frozen=True)
class Person:
    id: PersonId
    house_id: HouseId | None = None
    date_of_birth: str | None = None  # birth-year token, may be "unknown"
    date_of_death: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    @property
    def display_name(self) -> str:
        parts = [p for p in [self.first_name, self.last_name] if p]
        return " ".join(parts) if parts else str(self.id)


@dataclass(frozen=True)
class House:
    id: HouseId
    parent_house_id: HouseId | None = None
    house_name: str | None = None


@dataclass(frozen=True)
class Relationship:
    person1_id: PersonId
    person2_id: PersonId
    relationship_type: str  # SPOUSAL, PARENT_CHILD, LINEAGE_GAP
    # Lineage-gap annotations for labelling the connector
    estimated_generations: int | None = None
    lineage_notes: str | None = None


@dataclass
class Fragment:
    """A connected group of people; members keep population order."""

    people_ids: frozenset
    root_person: Person
    member_count: int
    members: list[Person] = field(default_factory=list)


@dataclass
class LineageGapConnection:
    relationship: Relationship
    descendant: Person
    ancestor: Person
    descendant_fragment_index: int
    ancestor_fragment_index: int


@dataclass
class HouseView:
    house_id: HouseId
    scoped_ids: set
    root_id: PersonId | None
    fragments: list[Fragment]
    lineage_gaps: list[LineageGapConnection]
