"""Stacks, queues, binary trees, a chained hash table, stack problems, expression evaluation and sorts."""

__version__ = "0.1.0"