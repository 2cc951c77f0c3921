#!/usr/bin/env python3

'''
Show what hexadecimal colors actually look like.
'''

import argparse
import logging
import sys

from viewer import color
from viewer.display import DEFAULT_GEOMETRY, DisplayError
from viewer.navigation import Navigator

class ArgumentParser(argparse.ArgumentParser):
    '''Configuration errors exit with status 1 rather than argparse's 2.'''

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, '%s: error: %s\n' % (self.prog, message))

    def fail(self, message):
        self.exit(1, '%s: error: %s\n' % (self.prog, message))

def positive_int(value):
    try:
        amount = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError('%r is not an integer' % value)
    if amount <= 0:
        raise argparse.ArgumentTypeError('%r is not a positive integer' % value)
    return amount

def build_parser(prog=None):
    parser = ArgumentParser(prog=prog, description='Show what hexadecimal colors look like.')
    parser.add_argument('colors', nargs='*', metavar='COLOR', help='color to show, as [#]RGB or [#]RRGGBB')
    parser.add_argument('-n', '--headless', action='store_true', help="Don't display the GUI, read key names from stdin")
    parser.add_argument('-o', '--ontop', action='store_true', help='The window stays on top of all other windows')
    parser.add_argument('-r', '--random', type=positive_int, default=0, metavar='AMT', help='Add AMT random colors')
    parser.add_argument('-s', '--seed', type=int, help='Seed of the random color generator')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug messages to stderr')
    return parser

def collect_colors(parser, args):
    '''Return the strings to show: positional colors first, then random ones.'''

    if args.seed is not None:
        color.seed_random(args.seed)

    strings = list(args.colors) + color.random_colors(args.random)
    if not strings:
        parser.error('no colors provided')
    return strings

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.headless and args.ontop:
        parser.error('--headless and --ontop are mutually exclusive')

    logging.basicConfig(format='%(name)s: %(message)s',
                        level=logging.DEBUG if args.verbose else logging.WARNING)

    strings = collect_colors(parser, args)
    try:
        entries = color.parse_colors(strings)
    except color.ColorError as e:
        parser.fail('%r is not a valid color: %s' % (e.text, e.reason))

    logging.getLogger("colat").debug(f'loaded {len(entries)} colors')

    if args.headless:
        from viewer import headless as screen
    else:
        from viewer import screen

    title, width, height, resizable = DEFAULT_GEOMETRY
    try:
        display = screen.create_display(title, width, height, resizable, args.ontop)
    except DisplayError as e:
        parser.fail('error creating window: %s' % e)

    try:
        Navigator(entries, display).run()
    except DisplayError as e:
        parser.fail('error waiting for event: %s' % e)
    finally:
        display.release()

    return 0

if __name__ == '__main__':
    sys.exit(main())
