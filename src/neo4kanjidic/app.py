"""Defines the Neo4j for KANJIDIC application."""

import logging

from typing import List, Sequence

from neo4j import GraphDatabase

from . import models
from . import transactions
from .ordering import GRADES


logger = logging.getLogger('neo4kanjidic')


class Neo4Kanjidic:
    """Neo4j for KANJIDIC graph database application.

    Args:
        uri: The URI for the driver connection.
        user: The username for authentication.
        password: The password for authentication.
    """

    def __init__(self, uri: str, user: str, password: str):
        """Constructor."""

        self.uri = uri
        self.user = user
        logger.debug('Initializing driver, URI: %s', uri)
        self.driver = GraphDatabase.driver(uri, auth=(user, password))

        self.closed = False

    def close(self):
        """Closes the driver connection."""

        if not self.closed:
            logger.debug('Closing driver')
            self.closed = True
            self.driver.close()

    def __del__(self):
        """Destructor."""

        self.close()

    def create_kanji_constraint(self):
        """Creates a uniqueness constraint on ``kanji`` for Kanji nodes."""

        with self.driver.session() as session:
            session.execute_write(transactions.create_kanji_constraint)

    def create_radical_constraint(self):
        """Creates a uniqueness constraint on ``number`` for Radical nodes."""

        with self.driver.session() as session:
            session.execute_write(transactions.create_radical_constraint)

    def create_grade_constraint(self):
        """Creates a uniqueness constraint on ``grade`` for Grade nodes."""

        with self.driver.session() as session:
            session.execute_write(transactions.create_grade_constraint)

    def add_kanji(
        self,
        entries: Sequence[models.Entry],
    ) -> List[str]:
        """Adds `entries` to the database as Kanji nodes.

        Args:
            entries: Sequence of entries.

        Returns:
            List of created or merged Kanji node IDs.
        """

        logger.debug(
            'Adding Kanji nodes for entries (%s, ..., %s)',
            entries[0].kanji,
            entries[-1].kanji,
        )
        with self.driver.session() as session:
            return session.execute_write(
                transactions.merge_and_return_kanji,
                entries,
            )

    def add_radicals_for_kanji(
        self,
        entries: Sequence[models.Entry],
    ) -> List[list]:
        """Links the Kanji nodes of `entries` to their Radical nodes.

        Args:
            entries: Sequence of entries.

        Returns:
            List of (Radical node ID, relationship ID) pairs.
        """

        logger.debug(
            'Adding Radical relationships for entries (%s, ..., %s)',
            entries[0].kanji,
            entries[-1].kanji,
        )
        with self.driver.session() as session:
            return session.execute_write(
                transactions.merge_and_return_radicals_for_kanji,
                entries,
            )

    def add_grades_for_kanji(
        self,
        entries: Sequence[models.Entry],
    ) -> List[list]:
        """Links the Kanji nodes of `entries` to their Grade nodes.

        Args:
            entries: Sequence of entries.

        Returns:
            List of (Grade node ID, relationship ID) pairs.
        """

        logger.debug(
            'Adding Grade relationships for entries (%s, ..., %s)',
            entries[0].kanji,
            entries[-1].kanji,
        )
        with self.driver.session() as session:
            return session.execute_write(
                transactions.merge_and_return_grades_for_kanji,
                entries,
                GRADES,
            )
