"""Classic algorithms over lists, strings, linked lists, trees, stacks and queues."""

__version__ = "0.1.0"
__all__ = [
    "hashing",
    "linked_list",
    "queues",
    "sequences",
    "stacks",
    "text",
    "trees",
    "two_pointer",
]