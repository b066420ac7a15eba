"""A minimal DPLL SAT solver for DIMACS CNF formulas"""

from dpllsat.dimacs import MAX_VARS, parse, parse_file, parse_string
from dpllsat.dpll import DPLL, solve
from dpllsat.errors import (CapacityExceeded, Conflict, FileOpenError, FormatError,
                            SolverError, UsageError)
from dpllsat.formula import Formula

__version__ = "0.1.0"
