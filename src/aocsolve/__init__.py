"""
Advent of Code solvers built on a shared line-stream pipeline.
"""

__version__ = "0.1.0"
