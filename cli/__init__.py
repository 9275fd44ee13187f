"""
sortlog CLI - Instrumented sorting inspection

Commands:
- sortlog algorithms - List available algorithms
- sortlog run - Sort values and summarize the step log
- sortlog replay - Reconstruct the sequence at a step
- sortlog verify - Check run properties and determinism
"""

__version__ = "0.1.0"
