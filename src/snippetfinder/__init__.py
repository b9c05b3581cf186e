"""SnippetFinder - lazy discovery and preview of small text documents."""

__version__ = "0.1.0"
