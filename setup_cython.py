"""Build script for Cython extensions.

Usage:
    python setup_cython.py build_ext --inplace

This compiles qwirkle/board.py, qwirkle/scoring.py and qwirkle/engine.py
(the legality scan, scoring and search hot path) into shared-object
(.so / .pyd) files that Python imports in place of the pure-Python modules.
"""

from setuptools import setup, Extension
from Cython.Build import cythonize

extensions = [
    Extension(
        "qwirkle.board",
        ["qwirkle/board.py"],
    ),
    Extension(
        "qwirkle.scoring",
        ["qwirkle/scoring.py"],
    ),
    Extension(
        "qwirkle.engine",
        ["qwirkle/engine.py"],
    ),
]

setup(
    name="qwirkle-cython",
    ext_modules=cythonize(
        extensions,
        compiler_directives={
            "language_level": "3",
            "boundscheck": False,
            "wraparound": False,
        },
    ),
)
