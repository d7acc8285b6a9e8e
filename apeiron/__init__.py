"""Numerical utilities: tolerant comparisons, basic maths, strings, random generators, timing and bound-checked arrays."""

__version__ = "0.1.0"