"""Filter type alias.

Python PEP 695 type alias syntax.
Filter function: takes an element, returns True to accept.
"""

from collections.abc import Callable

type Filter[T] = Callable[[T], bool]
