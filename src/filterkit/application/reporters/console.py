"""Console reporter: Filter → rich tree string.

Diagnostics only: the output is meant for humans and is never parsed back.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from filterkit.domain.filters.categorical import CategoricalFilter
from filterkit.domain.filters.composite import CombinedFilter, ConjFilter, DisjFilter
from filterkit.domain.filters.membership import MembershipFilter
from filterkit.domain.filters.negation import NegatedFilter
from filterkit.domain.filters.sampling import RandomFilter

if TYPE_CHECKING:
    from filterkit.domain.filters.types import Filter


@dataclass(frozen=True, slots=True)
class TreeConfig:
    """Configuration for tree reporter.

    All fields have defaults. Immutable (frozen dataclass).

    Attributes:
        width: Console width in characters.
        force_terminal: Emit terminal styling codes.
        max_members: Max membership values shown per node. None = unlimited.
    """

    width: int = 120
    force_terminal: bool = False
    max_members: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError(f"width must be > 0, got {self.width}")
        if self.max_members is not None and self.max_members < 0:
            raise ValueError(f"max_members must be >= 0, got {self.max_members}")


class FilterTreeReporter:
    """Renders a filter and its sub-filters as an indented tree.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: TreeConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or TreeConfig()

    def report(self, flt: Filter[Any]) -> str:
        """Format filter as a tree.

        Args:
            flt: Filter to render. Any callable; non-library callables
                 render as leaves named by __qualname__.

        Returns:
            Rendered tree text.
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.force_terminal,
            width=self._config.width,
        )

        tree = Tree(self._label(flt))
        self._add_children(tree, flt)
        console.print(tree)

        return output.getvalue()

    def _add_children(self, node: Tree, flt: Filter[Any]) -> None:
        for child in self._children(flt):
            branch = node.add(self._label(child))
            self._add_children(branch, child)

    def _children(self, flt: Filter[Any]) -> tuple[Filter[Any], ...]:
        match flt:
            case CombinedFilter():
                return (flt.first, flt.second)
            case ConjFilter() | DisjFilter():
                return flt.filters
            case NegatedFilter(negated=True):
                return (flt.inner,)
            case NegatedFilter():
                return self._children(flt.inner)
            case _:
                return ()

    def _label(self, flt: Filter[Any]) -> Text:
        match flt:
            case CategoricalFilter(judgment=True):
                label = "accept all"
            case CategoricalFilter():
                label = "reject all"
            case MembershipFilter():
                prefix = "in" if flt.judgment else "not in"
                label = f"{prefix} {self._format_members(flt.members)}"
            case CombinedFilter():
                label = "AND" if flt.conjunction else "OR"
            case ConjFilter():
                label = f"ALL ({len(flt)})"
            case DisjFilter():
                label = f"ANY ({len(flt)})"
            case NegatedFilter(negated=True):
                label = "NOT"
            case NegatedFilter():
                return self._label(flt.inner)
            case RandomFilter():
                label = f"random (fraction={flt.fraction})"
            case _:
                label = getattr(flt, "__qualname__", None) or repr(flt)
        # Text: labels are literal, never rich markup
        return Text(label)

    def _format_members(self, members: frozenset[Any]) -> str:
        rendered = sorted(repr(m) for m in members)
        limit = self._config.max_members
        if limit is not None and len(rendered) > limit:
            hidden = len(rendered) - limit
            rendered = [*rendered[:limit], f"… (+{hidden} more)"]
        return "{" + ", ".join(rendered) + "}"
