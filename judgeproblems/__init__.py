"""Solutions to classic online-judge exercises and a coin-toss simulation."""

__version__ = "0.1.0"
__all__ = ["sequences", "matrices", "text", "records", "coin", "cli"]