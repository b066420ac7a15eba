# cython: language_level=3
# cython: profile=False


class Formula:
    """A CNF formula that is simplified in place during search.

    clauses - the remaining clauses, each a list of non-zero ints
    original - the clauses as parsed, never modified
    """

    def __init__(self, nvars, clauses, original=None):
        self.nvars = nvars
        self.clauses = [list(c) for c in clauses]
        self.original = original if original is not None else [list(c) for c in clauses]
        self.empty = any(len(c) == 0 for c in self.clauses)

    def find_unit_clauses(self):
        """Return the set of literals appearing alone in a clause"""
        return {c[0] for c in self.clauses if len(c) == 1}

    def find_pure_literals(self):
        """Return the set of literals whose negation does not occur"""
        ret = set()
        bad_vars = set()
        for c in self.clauses:
            for l in c:
                if abs(l) in bad_vars or l in ret:
                    continue
                if -l in ret:
                    bad_vars.add(abs(l))
                    ret.discard(-l)
                else:
                    ret.add(l)
        return ret

    def has_empty_clause(self):
        return self.empty

    def is_empty(self):
        return len(self.clauses) == 0

    def assign_literal(self, l):
        """Make l true: drop satisfied clauses and remove -l from the rest"""
        self.clauses = [c for c in self.clauses if l not in c]
        for c in self.clauses:
            if -l in c:
                c[:] = [x for x in c if x != -l]
                if len(c) == 0:
                    self.empty = True
                    return

    def assign_many(self, ls):
        for l in sorted(ls):
            self.assign_literal(l)
            if self.empty:
                break

    def duplicate(self):
        return Formula(self.nvars, self.clauses, self.original)

    def first_literal_of_first_clause(self):
        return self.clauses[0][0]

    def satisfied_by(self, model):
        """Check if every original clause has a literal in model"""
        true_lits = set(model)
        return all(any(l in true_lits for l in c) for c in self.original)

    def __len__(self):
        return len(self.clauses)

    def __str__(self):
        meta = "p cnf {} {}".format(self.nvars, len(self.original))
        return "\n".join([meta] + [" ".join(str(l) for l in c + [0]) for c in self.original])

    def __repr__(self):
        return "Formula(nvars={}, clauses={})".format(self.nvars, self.clauses)
