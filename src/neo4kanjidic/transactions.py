"""Defines Cypher transaction functions for the application."""

import textwrap

from typing import Any, Dict, List

from neo4j import Transaction

from .models import Entry


def to_row(entry: Entry) -> Dict[str, Any]:
    """Returns `entry` as a flat property map for Cypher parameters.

    Neo4j properties cannot hold nested maps, so the derived Morohashi
    reference is left out; its raw ``MP``/``MN`` values are kept.
    """

    return entry.model_dump(exclude={'morohashi'})


def create_kanji_constraint(tx: Transaction):
    """Creates a uniqueness constraint on ``kanji`` for Kanji nodes.

    Args:
        tx: The Neo4j transaction object.
    """

    cypher = textwrap.dedent("""\
        CREATE CONSTRAINT kanji_kanji IF NOT EXISTS
        FOR (n:Kanji) REQUIRE n.kanji IS UNIQUE
    """)
    tx.run(cypher)


def create_radical_constraint(tx: Transaction):
    """Creates a uniqueness constraint on ``number`` for Radical nodes.

    Args:
        tx: The Neo4j transaction object.
    """

    cypher = textwrap.dedent("""\
        CREATE CONSTRAINT radical_number IF NOT EXISTS
        FOR (n:Radical) REQUIRE n.number IS UNIQUE
    """)
    tx.run(cypher)


def create_grade_constraint(tx: Transaction):
    """Creates a uniqueness constraint on ``grade`` for Grade nodes.

    Args:
        tx: The Neo4j transaction object.
    """

    cypher = textwrap.dedent("""\
        CREATE CONSTRAINT grade_grade IF NOT EXISTS
        FOR (n:Grade) REQUIRE n.grade IS UNIQUE
    """)
    tx.run(cypher)


def merge_and_return_kanji(
    tx: Transaction,
    entries: List[Entry],
):
    """Transaction function for :meth:`add_kanji`."""

    cypher = textwrap.dedent("""\
        UNWIND $entries AS entry
        MERGE (k:Kanji {kanji: entry.kanji})
        SET k += entry
        RETURN elementId(k) AS node_id
    """)
    result = tx.run(cypher, entries=[to_row(entry) for entry in entries])
    return result.value('node_id')


def merge_and_return_radicals_for_kanji(
    tx: Transaction,
    entries: List[Entry],
):
    """Transaction function for :meth:`add_radicals_for_kanji`."""

    cypher = textwrap.dedent("""\
        UNWIND $entries AS entry
        MATCH (k:Kanji {kanji: entry.kanji})
        MERGE (r:Radical {number: entry.radical})
        MERGE (k)-[rel:HAS_RADICAL]->(r)
        RETURN elementId(r) AS node_id, elementId(rel) AS relationship_id
    """)
    rows = [
        {'kanji': entry.kanji, 'radical': entry.radical}
        for entry in entries if entry.radical is not None
    ]
    result = tx.run(cypher, entries=rows)
    return result.values()


def merge_and_return_grades_for_kanji(
    tx: Transaction,
    entries: List[Entry],
    descriptions: Dict[int, str],
):
    """Transaction function for :meth:`add_grades_for_kanji`."""

    cypher = textwrap.dedent("""\
        UNWIND $entries AS entry
        MATCH (k:Kanji {kanji: entry.kanji})
        MERGE (g:Grade {grade: entry.grade})
        ON CREATE
          SET g.description = entry.description
        MERGE (k)-[rel:TAUGHT_IN]->(g)
        RETURN elementId(g) AS node_id, elementId(rel) AS relationship_id
    """)
    rows = [
        {
            'kanji': entry.kanji,
            'grade': entry.grade,
            'description': descriptions.get(entry.grade),
        }
        for entry in entries if entry.grade is not None
    ]
    result = tx.run(cypher, entries=rows)
    return result.values()
