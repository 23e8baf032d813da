"""
Gist-Log: interactive daily work log stored in a GitHub Gist.

This package asks a few questions about your day and merges the answers
into a single Markdown file kept in a gist. It includes:

- Multi-point prompts for what you did, what's next and what blocks you
- A 1-5 productivity score
- A dated index of entries at the top of the document
- In-place updates when a date is logged again

For more information, see the README.md file.
"""

from .cli import main

__version__ = "0.1.0"
__author__ = "gist-log contributors"
__license__ = "MIT"
__all__ = ['main']
