"""SQLite database operations for house and family storage."""

from pathlib import Path
import sqlite3

from models import House, Person, Relationship
from parsing import coerce_id

# Ids are stored as TEXT so both numeric and string ids fit; numeric ones
# come back as ints through coerce_id.


def create_database(db_path: Path) -> sqlite3.Connection:
    """Create SQLite database with house, person and relationship tables."""
    conn = sqlite3.connect(db_path)
    cursor = conn.cursor()

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS house (
            id TEXT PRIMARY KEY,
            house_name TEXT,
            parent_house_id TEXT,
            FOREIGN KEY (parent_house_id) REFERENCES house(id)
        )
    """)

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS person (
            id TEXT PRIMARY KEY,
            first_name TEXT,
            last_name TEXT,
            house_id TEXT,
            date_of_birth TEXT,
            date_of_death TEXT,
            FOREIGN KEY (house_id) REFERENCES house(id)
        )
    """)

    cursor.execute("""
        CREATE TABLE IF NOT EXISTS relationship (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            person1_id TEXT NOT NULL,
            person2_id TEXT NOT NULL,
            relationship_type TEXT NOT NULL,
            estimated_generations INTEGER,
            lineage_notes TEXT
        )
    """)

    conn.commit()
    return conn


def store_data(
    conn: sqlite3.Connection,
    people: list[Person],
    houses: list[House],
    relationships: list[Relationship],
):
    """Insert houses, people and relationships into the database."""
    cursor = conn.cursor()

    cursor.executemany(
        """
        INSERT OR REPLACE INTO house (id, house_name, parent_house_id)
        VALUES (?, ?, ?)
        """,
        [(h.id, h.house_name, h.parent_house_id) for h in houses],
    )

    cursor.executemany(
        """
        INSERT OR REPLACE INTO person
        (id, first_name, last_name, house_id, date_of_birth, date_of_death)
        VALUES (?, ?, ?, ?, ?, ?)
        """,
        [
            (
                p.id,
                p.first_name,
                p.last_name,
                p.house_id,
                p.date_of_birth,
                p.date_of_death,
            )
            for p in people
        ],
    )

    # Relationships may point at people that were never stored
    cursor.executemany(
        """
        INSERT INTO relationship
        (person1_id, person2_id, relationship_type, estimated_generations, lineage_notes)
        VALUES (?, ?, ?, ?, ?)
        """,
        [
            (
                r.person1_id,
                r.person2_id,
                r.relationship_type,
                r.estimated_generations,
                r.lineage_notes,
            )
            for r in relationships
        ],
    )

    conn.commit()


def load_data(
    conn: sqlite3.Connection,
) -> tuple[list[Person], list[House], list[Relationship]]:
    """Read every house, person and relationship back out of the database."""
    cursor = conn.cursor()

    cursor.execute("SELECT id, house_name, parent_house_id FROM house ORDER BY rowid")
    houses = [
        House(id=coerce_id(row[0]), house_name=row[1], parent_house_id=coerce_id(row[2]))
        for row in cursor.fetchall()
    ]

    cursor.execute(
        "SELECT id, first_name, last_name, house_id, date_of_birth, date_of_death "
        "FROM person ORDER BY rowid"
    )
    people = [
        Person(
            id=coerce_id(row[0]),
            first_name=row[1],
            last_name=row[2],
            house_id=coerce_id(row[3]),
            date_of_birth=row[4],
            date_of_death=row[5],
        )
        for row in cursor.fetchall()
    ]

    cursor.execute(
        "SELECT person1_id, person2_id, relationship_type, estimated_generations, lineage_notes "
        "FROM relationship ORDER BY id"
    )
    relationships = [
        Relationship(
            person1_id=coerce_id(row[0]),
            person2_id=coerce_id(row[1]),
            relationship_type=row[2],
            estimated_generations=row[3],
            lineage_notes=row[4],
        )
        for row in cursor.fetchall()
    ]

    return people, houses, relationships
