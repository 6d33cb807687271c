from bubblecons.plist import plist
from bubblecons.sort import bubblesort
from bubblecons.cps import bubblesort_cps
from bubblecons.text import parse, print_list
from bubblecons.errors import ParseError
import argparse
import logging
import sys


EXAMPLE = (3, 7, 1, 0, 0, 45, 1001, 2, -100)

bubblecons = argparse.ArgumentParser(
    description='Bubble sort a persistent list, printing it before and after',
    prog='bubblecons'
)

bubblecons.add_argument(
    'values', nargs='*', type=int,
    help=f'integers to sort [default: {",".join(map(str, EXAMPLE))}]'
)

bubblecons.add_argument(
    '-f', metavar='FILE', dest='input',
    help='read a comma-separated list of integers from FILE (- for stdin)'
)

bubblecons.add_argument(
    '--stackless', help='sort without recursion, for lists too long for the stack',
    action='store_true'
)

bubblecons.add_argument(
    '-v', '--verbose', help='log debugging output to stderr',
    action='store_true'
)


def read_input(filename):
    if filename == '-':
        return parse(sys.stdin.read())
    with open(filename) as file:
        return parse(file.read())


def main(argv=None):
    args = bubblecons.parse_args(argv)
    logging.basicConfig(
        format='%(levelname)s %(name)s: %(message)s',
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    if args.input is not None and args.values:
        bubblecons.error('cannot combine -f with values on the command line')

    try:
        if args.input is not None:
            xs = read_input(args.input)
        else:
            xs = plist(args.values or EXAMPLE)
    except OSError as err:
        print(f'bubblecons: {err}', file=sys.stderr)
        return 1
    except ParseError as err:
        filename = '<stdin>' if args.input == '-' else args.input
        print(err.get_info(filename), file=sys.stderr)
        return 1

    print_list(xs)
    sort = bubblesort_cps if args.stackless else bubblesort
    print_list(sort(xs))
    return 0

if __name__ == '__main__':
    sys.exit(main())
