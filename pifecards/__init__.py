"""Two-player terminal card game of sets and runs, with a persistent scoreboard."""

__version__ = "0.1.0"
__all__ = ["__version__"]