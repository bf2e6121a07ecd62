"""Shell command-line parsing with quoting, expansion, pipes and redirections."""

__version__ = "0.1.0"