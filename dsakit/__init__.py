"""Classic data structures and algorithms in plain Python: sorting, searching,
linked lists, trees, stacks, queues, graphs, numeric helpers and small tools."""

__version__ = "0.1.0"