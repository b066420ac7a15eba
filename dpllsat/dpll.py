# cython: language_level=3
# cython: profile=False

import logging as logging

from dpllsat.errors import Conflict


def INFO(dl, msg):
    logging.info('  ' * max(0, dl) + str(msg))

def DEBUG(dl, msg):
    logging.debug('  ' * max(0, dl) + str(msg).replace('\n', '\n' + '  ' * max(0, dl)))


def unit_propagate(formula, acc):
    """Assign unit clauses until none is left. Return the number of literals assigned.

    Raise Conflict on complementary units or when a clause becomes empty.
    """
    n = 0
    while True:
        units = formula.find_unit_clauses()
        if len(units) == 0:
            break
        if len(units) > 1:
            for l in units:
                if -l in units:
                    raise Conflict(l)
        acc.extend(sorted(units))
        n += len(units)
        formula.assign_many(units)
        if formula.has_empty_clause():
            raise Conflict()
    return n


def eliminate_pure_literals(formula, acc):
    """Assign pure literals until none is left. Return the number of literals assigned"""
    n = 0
    while True:
        lits = formula.find_pure_literals()
        if len(lits) == 0:
            break
        acc.extend(sorted(lits))
        n += len(lits)
        formula.assign_many(lits)
        if formula.has_empty_clause():
            raise Conflict()
    return n


def complete_assignment(acc, nvars):
    """Return acc sorted by variable, with unassigned variables set to True"""
    by_var = sorted(acc, key=abs)
    res = list()
    current = 1
    for l in by_var:
        while current < abs(l):
            res.append(current)
            current += 1
        res.append(l)
        current = abs(l) + 1
    res.extend(range(current, nvars + 1))
    return sorted(res, key=abs)


class DPLL:
    def __init__(self, formula):
        self.formula = formula
        self.decisions = 0
        self.backtracks = 0
        self.propagated = 0
        self.pure = 0

    def run(self):
        """Run DPLL. Return the complete model if SAT, or None otherwise"""
        acc = list()
        sat = self.solve_helper(self.formula, acc, 0)

        stats = []
        stats.append("Statistics")
        stats.append("Decisions: %d" % self.decisions)
        stats.append("Backtracks: %d" % self.backtracks)
        stats.append("Unit propagations: %d" % self.propagated)
        stats.append("Pure literals: %d" % self.pure)
        INFO(0, "\n".join(stats))

        if not sat:
            return None
        model = complete_assignment(acc, self.formula.nvars)
        assert(self.formula.satisfied_by(model)) # make sure that, if sat, the model is indeed correct
        return model

    def solve_helper(self, formula, acc, dl):
        if formula.has_empty_clause():
            return False

        try:
            self.propagated += unit_propagate(formula, acc)
            self.pure += eliminate_pure_literals(formula, acc)
        except Conflict:
            DEBUG(dl, "Conflict")
            return False

        if formula.is_empty():
            return True

        mark = len(acc)
        v = formula.first_literal_of_first_clause()
        self.decisions += 1
        DEBUG(dl, "{} clauses left".format(len(formula)))

        # the copy is dropped once the branch returns
        INFO(dl, "{}  ----------d----------".format(v))
        f2 = formula.duplicate()
        acc.append(v)
        f2.assign_literal(v)
        if self.solve_helper(f2, acc, dl + 1):
            return True

        # rollback and try again
        self.backtracks += 1
        del acc[mark:]
        INFO(dl, "Backtrack, assert {}".format(-v))
        acc.append(-v)
        formula.assign_literal(-v)
        return self.solve_helper(formula, acc, dl + 1)


def solve(formula):
    """Return a satisfying model of formula as a list of literals, or None"""
    return DPLL(formula).run()
