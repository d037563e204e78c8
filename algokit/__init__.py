"""Classic data structures and algorithms: arrays, linked lists, stacks, queues, hash tables, search trees and searching."""

__version__ = "0.1.0"