import argparse
import logging
import sys

from bencodetree.bencode import bdecode, bencode
from bencodetree.decoder import DEFAULT_MAX_DEPTH, max_supported_depth
from bencodetree.exceptions import BTFailure

logger = logging.getLogger(__name__)

def commandline_handler(args=None, stdin=None, stdout=None):
    parser = argparse.ArgumentParser(description='Inspect bencoded data read from stdin')
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--check", action="store_true", dest="check", default=False, help='Exit with status 1 if the input is not canonically encoded')
    mode.add_argument("--reencode", action="store_true", dest="reencode", default=False, help='Write the canonical encoding to stdout')
    parser.add_argument("--strict", action="store_true", dest="strict", default=False, help='Reject dictionaries with unsorted or duplicate keys')
    parser.add_argument("--max-depth", type=int, dest="max_depth", default=DEFAULT_MAX_DEPTH, help='Maximum nesting of lists and dictionaries')
    parser.add_argument("--verbose", help="increase output verbosity", action="store_true", dest="verbose")

    args = parser.parse_args(args)

    if not 0 <= args.max_depth <= max_supported_depth():
        parser.error("--max-depth must be between 0 and %i" % max_supported_depth())

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.ERROR)

    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout

    data = stdin.read()
    logger.debug('Read %i bytes' % len(data))

    try:
        value = bdecode(data, strict=args.strict, max_depth=args.max_depth)
    except BTFailure as e:
        print('error: %s' % e, file=sys.stderr)
        return 2

    if args.check:
        if bencode(value) == data:
            print('canonical', file=stdout)
            return 0
        print('not canonical', file=stdout)
        return 1

    if args.reencode:
        getattr(stdout, 'buffer', stdout).write(bencode(value))
        return 0

    print(repr(value), file=stdout)
    return 0

def main():
    sys.exit(commandline_handler())

if __name__ == '__main__':
    main()
