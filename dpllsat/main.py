#!/usr/bin/env python3

import argparse
import cProfile, pstats, io
import logging as logging
import sys
from pstats import SortKey

from dpllsat.dimacs import MAX_VARS, parse_file
from dpllsat.dpll import DPLL
from dpllsat.errors import SolverError, UsageError


class ArgumentParser(argparse.ArgumentParser):
    """Report usage problems on stdout and exit with status 1"""

    def error(self, message):
        raise UsageError(message)


def parseArg():
    """
    CMD argument parsing
    :return: the parser
    """
    parser = ArgumentParser(description='DPLL SAT solver',
                            epilog='-h prints this help and exits with status 0')
    parser.add_argument('infile')
    parser.add_argument('--max-vars', type=int, default=MAX_VARS,
                        help='largest number of variables accepted (default %(default)s)')
    parser.add_argument('--log', help='write the search trace to this file')
    parser.add_argument('-v', '--verbose', action='store_true', help='trace at DEBUG level, needs --log')
    parser.add_argument('--profile', help='profile the search, "-" prints to stdout')
    return parser


def format_model(model):
    if model is None:
        return "UNSAT"
    return " ".join(["v"] + [str(l) for l in model] + ["0"])


def run(argv=None):
    parser = parseArg()
    try:
        args = parser.parse_args(argv)
    except UsageError:
        print("Usage: {} <filename>".format(parser.prog))
        return 1

    if args.verbose and not args.log:
        print("Usage: {} <filename>, -v needs --log".format(parser.prog))
        return 1

    if args.log:
        level = logging.DEBUG if args.verbose else logging.INFO
        logging.basicConfig(level=level, filemode='w', filename=args.log, format='%(message)s',
                            force=True)

    try:
        formula = parse_file(args.infile, args.max_vars)
    except SolverError as e:
        print(e)
        return 1

    # one frame per decision, both branches included
    sys.setrecursionlimit(max(sys.getrecursionlimit(), 2 * formula.nvars + 100))

    if args.profile:
        pr = cProfile.Profile()
        pr.enable()

    model = DPLL(formula).run()

    if args.profile:
        pr.disable()
        s = io.StringIO()
        sortby = SortKey.TIME
        ps = pstats.Stats(pr, stream=s).strip_dirs().sort_stats(sortby)
        ps.print_stats(40)
        if args.profile == '-':
            print(s.getvalue())
        else:
            with open(args.profile, "w") as outfile:
                outfile.write(s.getvalue())

    print(format_model(model))
    return 0


def main():
    sys.exit(run())


if __name__ == '__main__':
    main()
