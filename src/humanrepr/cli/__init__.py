"""CLI layer: argument parsing, console output, and the error boundary.

This package is the outermost layer.  It may import from ``core`` and
``config``, but no other layer may import from ``cli``.
"""
