from setuptools import setup
from Cython.Build import cythonize
import Cython.Compiler.Options
Cython.Compiler.Options.annotate = False


setup(
    name = "dpllsat",
    version = "0.1.0",
    description = "A minimal DPLL SAT solver for DIMACS CNF formulas",
    packages = ["dpllsat"],
    python_requires = ">=3.8",
    ext_modules = cythonize([
        "dpllsat/formula.py"
        , "dpllsat/dpll.py"
        ]),
    extras_require = {
        "test": ["pytest"],
    },
    entry_points = {
        "console_scripts": ["dpllsat = dpllsat.main:main"],
    },
)
