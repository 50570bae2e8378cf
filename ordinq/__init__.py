"""
'    ________ __________________  .___ _______   ________
'    \_____  \\______   \______ \ |   |\      \  \_____  \
'     /   |   \|       _/|    |  \|   |/   |   \  /  / \  \
'    /    |    \    |   \|    `   \   /    |    \/   \_/.  \
'    \_______  /____|_  /_______  /___\____|__  /\_____\ \_/
'            \/       \/        \/            \/        \__>
"""

# expose the main classes
from .comparator import Comparator, LexicographicalComparator, EmptiesComparator

# expose the factory functions
from .factories import (
    as_comparator,
    natural,
    reverse_order,
    from_function,
    comparing,
    case_insensitive,
    # combinators
    lexicographical,
    empties_first,
    empties_last,
    # order checks
    is_in_order,
    is_in_strict_order,
    # extremum selection
    min,
    max,
    min_of,
    max_of,
    least,
    greatest
)

# expose supporting data classes
from .types import (
    Maybe,
    CheckOptions
)

# define what `import *` does
__all__ = [
    "Comparator",
    "LexicographicalComparator",
    "EmptiesComparator",
    "as_comparator",
    "natural",
    "reverse_order",
    "from_function",
    "comparing",
    "case_insensitive",
    "lexicographical",
    "empties_first",
    "empties_last",
    "is_in_order",
    "is_in_strict_order",
    "min",
    "max",
    "min_of",
    "max_of",
    "least",
    "greatest",
    "Maybe",
    "CheckOptions"
]
