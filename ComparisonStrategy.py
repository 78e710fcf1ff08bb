from enum import Enum

class ComparisonStrategy(Enum):
    """
    Enumeration of the ways a SortedLinkedList can order its elements.

    The strategy is chosen once, when the list is constructed, and never
    changes afterwards.

    Values:
        NATURAL: Elements are compared with their own "<" and ">" operators.
        COMPARATOR: Elements are compared with a user-supplied cmp-style function
            returning a negative integer, zero, or a positive integer.
        KEY: Elements are compared by the natural ordering of a user-supplied
            key function's result.
    """
    NATURAL = 1
    COMPARATOR = 2
    KEY = 3
