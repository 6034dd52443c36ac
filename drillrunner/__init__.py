"""Run, verify and watch a list of small programming exercises."""

__version__ = "0.1.0"