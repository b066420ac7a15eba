"""Reading formulas in DIMACS CNF format"""

import logging as logging

from dpllsat.errors import CapacityExceeded, FileOpenError, FormatError
from dpllsat.formula import Formula

MAX_VARS = 1500


def parse_header(line, lineno):
    """Return (nvars, nclauses) from a `p cnf <nvars> <nclauses>` line"""
    fields = line.split()
    if len(fields) != 4 or fields[0] != 'p' or fields[1] != 'cnf':
        raise FormatError(lineno, "malformed header")
    try:
        nvars, nclauses = int(fields[2]), int(fields[3])
    except ValueError:
        raise FormatError(lineno, "malformed header")
    if nvars < 0 or nclauses < 0:
        raise FormatError(lineno, "negative count in header")
    return nvars, nclauses


def parse_clause(line, lineno, nvars):
    """Return the clause on the line, or None if it is always true"""
    clause = list()
    used_literals = set()
    always_true = False
    for token in line.split():
        try:
            l = int(token)
        except ValueError:
            raise FormatError(lineno, "bad literal {!r}".format(token))
        if l == 0:
            break
        if abs(l) > nvars:
            raise FormatError(lineno, "literal {} out of range".format(l))
        if l in used_literals:
            continue
        if -l in used_literals:
            always_true = True
        used_literals.add(l)
        clause.append(l)
    if always_true:
        return None
    return clause


def parse(lines, max_vars=MAX_VARS):
    """Build a Formula from an iterable of DIMACS lines"""
    it = iter(lines)
    lineno = 0

    # comments up to the header
    for line in it:
        lineno += 1
        if line.startswith('c'):
            continue
        if line.startswith('p'):
            break
        raise FormatError(lineno)
    else:
        raise FormatError(lineno + 1, "missing header")

    nvars, nclauses = parse_header(line, lineno)
    if nvars > max_vars:
        raise CapacityExceeded(nvars, max_vars)

    clauses = list()
    dropped = 0
    read = 0
    for line in it:
        if read == nclauses:
            break
        lineno += 1
        if line.startswith('c'):
            continue
        read += 1
        clause = parse_clause(line, lineno, nvars)
        if clause is None:
            dropped += 1
        else:
            clauses.append(clause)
    if read < nclauses:
        raise FormatError(lineno + 1, "expected {} clauses, found {}".format(nclauses, read))

    logging.info("Parsed {} variables, {} clauses ({} tautologies dropped)".format(
        nvars, len(clauses), dropped))
    return Formula(nvars, clauses)


def parse_string(text, max_vars=MAX_VARS):
    return parse(text.splitlines(), max_vars)


def parse_file(path, max_vars=MAX_VARS):
    try:
        # comments may hold arbitrary bytes
        f = open(path, 'r', encoding='utf-8', errors='replace')
    except OSError as e:
        raise FileOpenError(path, e)
    with f:
        return parse(f, max_vars)
