"""Command-line interface for multisum."""

from multisum.cli.parser import CLIParser
from multisum.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
