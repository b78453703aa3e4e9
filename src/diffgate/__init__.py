"""diffgate: staged and branch diffs from git, ready for downstream tools."""

__version__ = "0.1.0"
