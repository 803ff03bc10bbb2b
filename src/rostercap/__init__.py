"""Salary-cap roster builder with ACE value analysis."""

__version__ = "0.1.0"
