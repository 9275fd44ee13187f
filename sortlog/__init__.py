"""
Instrumented Sorting Engine

Sorting algorithms that emit a replayable step log of compare, swap and
write commands instead of mutating their input silently.
"""

__version__ = "0.1.0"
