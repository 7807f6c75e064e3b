"""Extract zip, tar and single-file compressed archives into a fresh directory beside each."""

__version__ = "0.2.0"