class SolverError(Exception):
    """Base class for errors reported to the user"""


class UsageError(SolverError):
    pass


class FileOpenError(SolverError):

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        super().__init__("Cannot open file: {}".format(cause.strerror or cause))


class FormatError(SolverError):

    def __init__(self, lineno, msg="unknown letter"):
        self.lineno = lineno
        super().__init__("Invalid DIMACS, {} at line {}".format(msg, lineno))


class CapacityExceeded(SystemExit):
    """Raised when a formula declares more variables than supported.

    This is a SystemExit so that it halts the program unless caught on purpose.
    """

    def __init__(self, nvars, max_vars):
        self.nvars = nvars
        self.max_vars = max_vars
        super().__init__("too many vars: {} > {}".format(nvars, max_vars))


class Conflict(Exception):
    """Internal signal: the current branch cannot be satisfied"""
