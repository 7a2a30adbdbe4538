"""Classic data structures, a breadth-first route finder and small array exercises."""

__version__ = "0.1.0"

__all__ = [
    "array",
    "vector",
    "linked_list",
    "stack",
    "fifo",
    "priority_queue",
    "splay_tree",
    "routes",
    "lab1",
    "practice",
]