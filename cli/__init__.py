"""
CLI module for NetMetrics.

The command-line interface providing analyze, degrees, bfs and clustering
commands.
"""

from cli.main import app

__all__ = ["app"]
