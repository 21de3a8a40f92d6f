"""
GitHub PR Report
================

Generate a periodic markdown changelog of the pull requests a set of users
opened, grouped under configurable labels.

This package provides functionality to:
- Search the pull requests each user created before, on or after a date
- Group them under labels mapped to repositories, with an "Unknown" section
- Emit markdown link references for every author and repository
- Fall back to a flat list when no configuration is available
"""

__version__ = "1.0.0"
__author__ = "GitHub PR Report"

from .fetch_github_prs import main

__all__ = ["main"]
