"""Command-line interface for checking JSON documents.

This package contains the core execution logic; the console script is a thin
wrapper around ``run_check``.
"""

from mycoassert.cli.check import run_check, setup_logging

__all__ = ['run_check', 'setup_logging']
