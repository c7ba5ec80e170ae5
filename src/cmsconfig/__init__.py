"""Build and serve the configuration document of a git-based CMS admin."""

__version__ = "0.1.0"
