import argparse

from .config import CALLBACK_METHODS


def parse_cmdline(argv=None):
    parser = argparse.ArgumentParser(description="Open a window driven by a single-shot timer")
    parser.add_argument('-d', '--delay', type=float, default=3.0,
                        help="Seconds before the timer fires")
    parser.add_argument('-s', '--start-on-mount', action='store_true',
                        help="Arm the timer as soon as the window opens")
    parser.add_argument('-p', '--passed-props', nargs='*', default=list(CALLBACK_METHODS),
                        choices=CALLBACK_METHODS, metavar='CALLBACK',
                        help="Timer callbacks to expose (%s)" % ', '.join(CALLBACK_METHODS))
    return parser.parse_args(argv)


def main():
    options = parse_cmdline()
    from .qt.app import run_demo
    run_demo(options)
