"""Compile, run and track progress through small programming exercises."""

__version__ = "4.6.0"