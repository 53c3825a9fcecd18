"""
1) Load an exported house/family dataset (JSON) into memory.
2) Store it with SQLite.
3) Read it back and check it for data health issues.
4) Build house views: visible people, root person, fragments and lineage gaps.
5) Print a summary for the renderer's benefit.
"""

from pathlib import Path
import argparse
import logging
import sys

from database import create_database, load_data, store_data
from parsing import coerce_id, load_json
from validation import validate_data
from views import build_house_view


def parse_args(argv=None) -> argparse.Namespace:
    project_root = Path(__file__).parent.parent

    p = argparse.ArgumentParser(description="Summarize house views of a family dataset.")
    p.add_argument(
        "--data",
        type=Path,
        default=None,
        help="JSON dataset to import. The database is rebuilt from it.",
    )
    p.add_argument("--db", type=Path, default=project_root / "family_tree.db")
    p.add_argument("--house", type=str, default=None, help="House id. Defaults to every house.")
    p.add_argument("--include-cadets", action="store_true")
    p.add_argument("--center", type=str, default=None, help="Person id to root the view on.")
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args(argv)


def print_house_view(view, people_by_id: dict, house_name: str):
    print(f"House: {house_name}")
    print(f"  Visible people: {len(view.scoped_ids)}")

    root = people_by_id.get(view.root_id)
    if root is not None:
        print(f"  Root person: {root.display_name} (b. {root.date_of_birth})")
    else:
        print("  Root person: none")

    print(f"  Fragments: {len(view.fragments)}")
    for i, frag in enumerate(view.fragments):
        print(
            f"    {i + 1}. {frag.member_count} members, root "
            f"{frag.root_person.display_name} (b. {frag.root_person.date_of_birth})"
        )

    for gap in view.lineage_gaps:
        line = (
            f"  Lineage gap: {gap.descendant.display_name} (fragment "
            f"{gap.descendant_fragment_index + 1}) -> {gap.ancestor.display_name} "
            f"(fragment {gap.ancestor_fragment_index + 1})"
        )
        if gap.relationship.estimated_generations is not None:
            line += f", ~{gap.relationship.estimated_generations} generations"
        if gap.relationship.lineage_notes:
            line += f": {gap.relationship.lineage_notes}"
        print(line)


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    db_path = args.db

    if args.data is not None:
        print(f"Loading dataset: {args.data}")
        people, houses, relationships = load_json(args.data)
        print(
            f"  Found {len(people)} people, {len(houses)} houses and "
            f"{len(relationships)} relationships"
        )

        # Delete existing database to ensure fresh start
        if db_path.exists():
            db_path.unlink()
            print(f"Deleted existing database: {db_path}")

        print(f"Storing data in SQLite: {db_path}")
        conn = create_database(db_path)
        store_data(conn, people, houses, relationships)
        conn.close()
    elif not db_path.exists():
        print(f"No database at {db_path}; pass --data to import one", file=sys.stderr)
        return 1

    conn = create_database(db_path)
    people, houses, relationships = load_data(conn)
    conn.close()

    print("Validating data...")
    warnings = validate_data(people, houses, relationships)
    if warnings:
        print(f"  Found {len(warnings)} validation warnings:")
        for w in warnings[:10]:  # Show first 10 warnings
            print(f"    - {w}")
        if len(warnings) > 10:
            print(f"    ... and {len(warnings) - 10} more")
    else:
        print("  No validation issues found")

    houses_by_id = {h.id: h for h in houses}
    if args.house is not None:
        house_id = coerce_id(args.house)
        if house_id not in houses_by_id:
            print(f"Unknown house: {args.house}", file=sys.stderr)
            return 1
        house_ids = [house_id]
    else:
        house_ids = list(houses_by_id)

    center_id = coerce_id(args.center) if args.center is not None else None
    people_by_id = {p.id: p for p in people}

    for house_id in house_ids:
        view = build_house_view(
            house_id,
            people,
            houses,
            relationships,
            include_cadets=args.include_cadets,
            center_id=center_id,
        )
        print_house_view(view, people_by_id, houses_by_id[house_id].house_name or str(house_id))

    print("Done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
