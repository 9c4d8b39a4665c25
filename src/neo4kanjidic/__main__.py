"""The neo4kanjidic main script."""

import argparse
import datetime
import itertools
import logging
import math
import sys

from typing import Iterable, List, Sequence

from .app import Neo4Kanjidic
from .models import Dictionary, Entry
from .ordering import GRADES, by_grade, ordering
from .parsers import kanjidic

logger = logging.getLogger('neo4kanjidic')


def get_parser() -> argparse.ArgumentParser:
    """Gets an argument parser for the main program.

    Returns:
        The argument parser.
    """

    parser = argparse.ArgumentParser(description='KANJIDIC parser to Neo4j')
    parser.add_argument('kanjidic_file', help='KANJIDIC file to parse')
    parser.add_argument('-e', '--encoding', default='euc-jp',
                        help='Encoding of the KANJIDIC file')
    parser.add_argument(
        '-n',
        '--neo4j-uri',
        default='neo4j://localhost:7687',
        help='Neo4j URI string',
    )
    parser.add_argument('-u', '--user', default='neo4j', help='Neo4j user')
    parser.add_argument('-p', '--pw', default='japanese', help='Neo4j pw')
    parser.add_argument('--strict', action='store_true',
                        help='Fail on unrecognized fields instead of skipping')
    parser.add_argument('--dry-run', action='store_true',
                        help='Parse and order only, do not connect to Neo4j')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('-d', '--debug', action='store_true',
                       help='Display debug log messages')
    group.add_argument('-s', '--silent', action='store_true',
                       help='Display only warning log messages')

    parser.add_argument('--neo4j-debug', action='store_true',
                        help='Display Neo4j driver debug messages')

    parser.add_argument('-b', '--batch-size', type=int, default=1024,
                        help='Sets the batch size for Neo4j DB queries')

    return parser


def configure_logger(
    level: str,
    log: logging.Logger,
):
    """Configures `log` to use logging level `level`.

    Args:
        level: The logging level to use.
        log: The logger to configure.
    """

    log.setLevel(level)

    handler = logging.StreamHandler()
    handler.setLevel(level)

    formatter = logging.Formatter(fmt='%(levelname)s: %(message)s')
    handler.setFormatter(formatter)

    log.addHandler(handler)


def grouper(
    iterable: Iterable[Entry],
    n: int,
) -> Iterable[Sequence[Entry]]:
    """Groups `iterable` into sequences of length `n`.

    The last sequence is padded with ``None``.

    Args:
        iterable: The object to divide into groups.
        n: The group size.

    Returns:
        Iterable of sequences of length `n`.
    """
    args = [iter(iterable)] * n
    return itertools.zip_longest(*args)


def summarize(dictionary: Dictionary):
    """Logs the number of kanji per grade of `dictionary`."""

    for grade, description in GRADES.items():
        count = len(by_grade(dictionary, grade))
        logger.info('%s: %s kanji', description, count)


def run(args: argparse.Namespace):
    """The central run function of :mod:`neo4kanjidic`.

    Args:
        args: Namespace of run function arguments.
    """

    logger.info('Parsing KANJIDIC (file = %s)', args.kanjidic_file)
    dictionary = kanjidic.read_kanjidic(
        args.kanjidic_file,
        encoding=args.encoding,
        strict=args.strict,
    )
    order = ordering(dictionary)
    logger.info('Discovered %s kanji', len(order))

    if args.dry_run:
        summarize(dictionary)
        return

    logger.info('Connecting to DB (URI = %s)', args.neo4j_uri)
    neo_app = Neo4Kanjidic(args.neo4j_uri, args.user, args.pw)
    try:
        neo_app.create_kanji_constraint()
        neo_app.create_radical_constraint()
        neo_app.create_grade_constraint()

        logger.info('Processing in batches of size %s', args.batch_size)
        num_batches = math.ceil(len(order) / args.batch_size)
        now = datetime.datetime.now()
        entries = (dictionary[kanji] for kanji in order)
        for batch, group in enumerate(grouper(entries, args.batch_size)):

            # Drop the None padding of the last group
            group = [entry for entry in group if entry is not None]

            neo_app.add_kanji(group)
            neo_app.add_radicals_for_kanji(group)
            neo_app.add_grades_for_kanji(group)

            logger.info(
                'Processed batch %s/%s, elapsed time: %s',
                batch + 1,
                num_batches,
                datetime.datetime.now() - now,
            )
    finally:
        neo_app.close()


def main(argv: List[str] = sys.argv[1:]) -> int:
    """The :mod:`neo4kanjidic` main function.

    Args:
        argv: The list of input arguments.

    Return:
        ``0`` upon successful completion, ``1`` otherwise.
    """

    args = get_parser().parse_args(argv)

    level = 'DEBUG' if args.debug else 'WARNING' if args.silent else 'INFO'
    configure_logger(level, logger)

    neo4j_level = 'DEBUG' if args.neo4j_debug else 'WARNING'
    configure_logger(neo4j_level, logging.getLogger('neo4j'))

    try:
        run(args)
    except KeyboardInterrupt:
        logger.critical('Interrupted by user, exiting')
        return 1
    except Exception as exc:
        logger.exception('Caught Exception: %s', exc)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
