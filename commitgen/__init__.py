"""
Commit Message Generator

AI-generated commit messages for staged git changes, committed interactively.
"""

__version__ = "0.1.0"
