"""Solutions to short competitive-programming problems, with input reading and a command."""

__version__ = "0.1.0"