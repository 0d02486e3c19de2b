# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for argmatch command-line output."""
from rich.console import Console

console = Console(highlight=False)
