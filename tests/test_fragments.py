"""Tests for fragment detection."""

from conftest import child_of, spouse

from fragments import detect_fragments, pick_fragment_root
from graph import build_relationship_index
from models import Person


def _ids(fragments):
    return [set(frag.people_ids) for frag in fragments]


class TestDetectFragments:

    def test_small_family_splits_into_two(self, small_family):
        people, _, relationships = small_family
        index = build_relationship_index(relationships)

        fragments = detect_fragments(people, index)

        assert _ids(fragments) == [{"A", "B", "C"}, {"D"}]
        assert fragments[0].root_person.id == "A"
        assert fragments[0].member_count == 3
        assert [p.id for p in fragments[0].members] == ["A", "B", "C"]
        assert fragments[1].root_person.id == "D"
        assert fragments[1].member_count == 1

    def test_partition_is_exact(self):
        people = [Person(str(i), date_of_birth=str(1000 + i)) for i in range(10)]
        relationships = [
            spouse("0", "1"),
            child_of("2", "0"),
            child_of("3", "2"),
            spouse("4", "5"),
            child_of("6", "9"),
            child_of("7", "ghost"),
        ]
        index = build_relationship_index(relationships)

        fragments = detect_fragments(people, index)

        seen: set = set()
        for frag in fragments:
            assert not (seen & frag.people_ids)
            seen |= frag.people_ids
        assert seen == {p.id for p in people}
        assert sum(frag.member_count for frag in fragments) == len(people)

    def test_fragments_sorted_by_root_birth(self):
        people = [
            Person("late", date_of_birth="1500"),
            Person("mystery", date_of_birth="unknown"),
            Person("early", date_of_birth="800"),
            Person("middle", date_of_birth="1200-05-01"),
        ]
        index = build_relationship_index([])

        fragments = detect_fragments(people, index)

        assert [f.root_person.id for f in fragments] == ["early", "middle", "late", "mystery"]

    def test_edges_outside_population_are_ignored(self, small_family):
        """B is left out, so A and D stay apart even though nothing else changes."""
        people, _, relationships = small_family
        index = build_relationship_index(relationships + [spouse("B", "D")])
        population = [p for p in people if p.id != "B"]

        fragments = detect_fragments(population, index)

        assert _ids(fragments) == [{"A", "C"}, {"D"}]

    def test_root_falls_back_when_everyone_has_parents(self):
        people = [
            Person("C", date_of_birth="945"),
            Person("E", date_of_birth="940"),
        ]
        relationships = [
            child_of("C", "A"),
            child_of("E", "X"),
            spouse("C", "E"),
        ]
        index = build_relationship_index(relationships)

        fragments = detect_fragments(people, index)

        assert len(fragments) == 1
        assert fragments[0].root_person.id == "E"

    def test_parentless_root_beats_older_member_with_parents(self):
        people = [
            Person("old", date_of_birth="900"),
            Person("young", date_of_birth="950"),
        ]
        index = build_relationship_index([child_of("old", "outsider"), spouse("old", "young")])

        fragments = detect_fragments(people, index)

        assert fragments[0].root_person.id == "young"

    def test_unknown_birth_years_do_not_raise(self):
        people = [
            Person("X", date_of_birth="unknown"),
            Person("Y", date_of_birth="1100"),
            Person("Z", date_of_birth=None),
        ]
        index = build_relationship_index([spouse("X", "Y"), spouse("Y", "Z")])

        fragments = detect_fragments(people, index)

        assert fragments[0].root_person.id == "Y"

    def test_repeat_calls_are_identical(self, small_family):
        people, _, relationships = small_family
        index = build_relationship_index(relationships)

        first = detect_fragments(people, index)
        second = detect_fragments(people, index)

        assert _ids(first) == _ids(second)
        assert [f.root_person for f in first] == [f.root_person for f in second]

    def test_cyclic_ancestry_terminates(self):
        people = [Person("X", date_of_birth="1000"), Person("Y", date_of_birth="1001")]
        index = build_relationship_index([child_of("X", "Y"), child_of("Y", "X")])

        fragments = detect_fragments(people, index)

        assert _ids(fragments) == [{"X", "Y"}]
        assert fragments[0].root_person.id == "X"

    def test_empty_population(self):
        assert detect_fragments([], build_relationship_index([])) == []

    def test_repeated_records_count_once(self):
        person = Person("A", date_of_birth="900")
        fragments = detect_fragments([person, person], build_relationship_index([]))
        assert len(fragments) == 1
        assert fragments[0].member_count == 1


def test_pick_fragment_root_tie_breaks_by_id():
    members = [Person("b", date_of_birth="900"), Person("a", date_of_birth="900")]
    assert pick_fragment_root(members, build_relationship_index([])).id == "a"
