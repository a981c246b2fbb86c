"""Solutions to classic online-judge problems, with small command-line runners."""

__version__ = "0.1.0"