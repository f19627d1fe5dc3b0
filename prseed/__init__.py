"""prseed: create random test pull requests for git-wrapper fixtures."""

__version__ = "0.1.0"
