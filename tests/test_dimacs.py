"""
Unit tests for the DIMACS reader.
"""

import os
import tempfile
import unittest

from dpllsat.dimacs import MAX_VARS, parse, parse_file, parse_string
from dpllsat.errors import CapacityExceeded, FileOpenError, FormatError


class TestHeader(unittest.TestCase):

    def test_comments_before_header(self):
        f = parse_string("c hello\nc world\np cnf 3 1\n1 -3 0\n")
        self.assertEqual(f.nvars, 3)
        self.assertEqual(f.clauses, [[1, -3]])

    def test_unknown_letter_before_header(self):
        with self.assertRaises(FormatError) as cm:
            parse_string("c ok\nx bad\np cnf 1 1\n1 0\n")
        self.assertEqual(cm.exception.lineno, 2)
        self.assertIn("line 2", str(cm.exception))

    def test_missing_header(self):
        with self.assertRaises(FormatError):
            parse_string("c only comments\n")

    def test_malformed_header(self):
        with self.assertRaises(FormatError):
            parse_string("p cnf three 1\n1 0\n")
        with self.assertRaises(FormatError):
            parse_string("p dnf 1 1\n1 0\n")

    def test_capacity(self):
        with self.assertRaises(CapacityExceeded) as cm:
            parse_string("p cnf {} 1\n1 0\n".format(MAX_VARS + 1))
        self.assertEqual(cm.exception.nvars, MAX_VARS + 1)
        self.assertNotEqual(cm.exception.code, 0)

    def test_capacity_is_not_a_regular_error(self):
        # halts the program instead of returning a failure
        self.assertFalse(issubclass(CapacityExceeded, Exception))
        self.assertTrue(issubclass(CapacityExceeded, SystemExit))

    def test_capacity_checked_before_clauses(self):
        with self.assertRaises(CapacityExceeded):
            parse_string("p cnf 10 1\nnot a clause\n", max_vars=5)

    def test_runtime_capacity(self):
        f = parse_string("p cnf 2000 1\n1 0\n", max_vars=2000)
        self.assertEqual(f.nvars, 2000)


class TestClauses(unittest.TestCase):

    def test_duplicates_collapsed(self):
        f = parse_string("p cnf 2 1\n1 2 1 2 0\n")
        self.assertEqual(f.clauses, [[1, 2]])

    def test_tautology_dropped(self):
        f = parse_string("p cnf 3 2\n1 2 -1 0\n3 0\n")
        self.assertEqual(f.clauses, [[3]])
        self.assertEqual(f.original, [[3]])

    def test_empty_clause(self):
        f = parse_string("p cnf 1 1\n0\n")
        self.assertEqual(f.clauses, [[]])
        self.assertTrue(f.has_empty_clause())

    def test_reads_exactly_nclauses(self):
        f = parse_string("p cnf 2 1\n1 0\n2 0\n")
        self.assertEqual(f.clauses, [[1]])

    def test_comment_inside_clauses(self):
        f = parse_string("p cnf 2 2\n1 0\nc skipped\n-2 0\n")
        self.assertEqual(f.clauses, [[1], [-2]])

    def test_too_few_clauses(self):
        with self.assertRaises(FormatError):
            parse_string("p cnf 2 3\n1 0\n2 0\n")

    def test_bad_literal(self):
        with self.assertRaises(FormatError) as cm:
            parse_string("p cnf 2 1\n1 x 0\n")
        self.assertEqual(cm.exception.lineno, 2)

    def test_literal_out_of_range(self):
        with self.assertRaises(FormatError):
            parse_string("p cnf 2 1\n1 3 0\n")

    def test_zero_clauses(self):
        f = parse_string("p cnf 4 0\n")
        self.assertTrue(f.is_empty())
        self.assertEqual(f.nvars, 4)

    def test_parse_from_lines(self):
        f = parse(["p cnf 2 1", "-1 2 0"])
        self.assertEqual(f.clauses, [[-1, 2]])


class TestFiles(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        for name in os.listdir(self.test_dir):
            os.remove(os.path.join(self.test_dir, name))
        os.rmdir(self.test_dir)

    def test_parse_file(self):
        path = os.path.join(self.test_dir, "a.cnf")
        with open(path, "w") as f:
            f.write("c test\np cnf 2 2\n1 2 0\n-1 0\n")
        formula = parse_file(path)
        self.assertEqual(formula.clauses, [[1, 2], [-1]])

    def test_latin1_comment(self):
        path = os.path.join(self.test_dir, "latin1.cnf")
        with open(path, "wb") as f:
            f.write(b"c auteur: Andr\xe9s\np cnf 1 1\n1 0\n")
        formula = parse_file(path)
        self.assertEqual(formula.clauses, [[1]])

    def test_missing_file(self):
        with self.assertRaises(FileOpenError) as cm:
            parse_file(os.path.join(self.test_dir, "missing.cnf"))
        self.assertIn("Cannot open file", str(cm.exception))
        self.assertIsInstance(cm.exception.cause, OSError)


if __name__ == '__main__':
    unittest.main()
