"""Sort integers on two stacks with a restricted set of moves."""

__version__ = "0.1.0"