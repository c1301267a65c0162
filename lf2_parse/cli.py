"""
Parse LF2 object data files and print the result.

Usage:
    python -m lf2_parse data/frozen.dat                # print the parsed object
    python -m lf2_parse --summary data/*.dat           # one line per file
    python -m lf2_parse --decode data/frozen.dat       # print the decoded text
"""
import argparse
import logging
import sys

from lf2_parse.errors import ObjectDataError, ObjectDataSurplus
from lf2_parse.object_data import ObjectData

logger = logging.getLogger(__name__)


def summarize(object_data: ObjectData) -> str:
    header = object_data.header
    n_elements = sum(len(frame.elements) for frame in object_data.frames)
    return (f'{header.name}: {len(object_data.frames)} frames, {n_elements} elements, '
            f'{len(header.sprite_files)} sprite files')


def process_file(path, summary=False, decode=False) -> bool:
    """Parses and prints one file. Returns False if it failed."""
    try:
        text = ObjectData.open(path)
        if decode:
            print(text)
            return True
        try:
            object_data = ObjectData.try_from(text)
        except ObjectDataSurplus as e:
            print(f'{path}: warning: {e}', file=sys.stderr)
            object_data = e.object_data
    except ObjectDataError as e:
        print(f'{path}: {e}', file=sys.stderr)
        return False

    if summary:
        print(f'{path}: {summarize(object_data)}')
    else:
        print(object_data)
    return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Parse LF2 object data files')
    parser.add_argument('paths', nargs='+', help='Object data files (.dat or .txt)')
    parser.add_argument(
        '--summary', action='store_true',
        help='Print one summary line per file instead of the full object',
    )
    parser.add_argument(
        '--decode', action='store_true',
        help='Print the decoded text instead of parsing it',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    n_failed = 0
    for path in args.paths:
        if not process_file(path, summary=args.summary, decode=args.decode):
            n_failed += 1
    if n_failed:
        logger.info('%d of %d files failed', n_failed, len(args.paths))
    return 1 if n_failed else 0
