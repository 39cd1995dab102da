"""Stack, queue, deque, ordered set and linked list, with small programs built on them."""

__version__ = "0.1.0"