"""Hierarchy of documented modules keyed by path segment."""

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from navindex.item_sort_key import item_sort_key


@dataclass(frozen=True)
class ModuleNode:
    """One module in the tree; ``documented`` is False for namespace-only modules."""

    path: tuple[str, ...]
    documented: bool
    children: Mapping[str, "ModuleNode"] = field(default_factory=dict)

    @property
    def segment(self) -> str:
        """Last path segment, empty for the synthetic root."""
        return self.path[-1] if self.path else ""


class ModuleTree:
    """Read-only module hierarchy built from a set of module paths."""

    def __init__(self, root: ModuleNode) -> None:
        """Wrap an already-built root node."""
        self.root = root

    @classmethod
    def from_paths(
        cls,
        module_paths: Iterable[Sequence[str]],
        populated: Iterable[Sequence[str]] = (),
    ) -> "ModuleTree":
        """Build a tree, creating intermediate nodes for every path prefix."""
        populated_set = {tuple(p) for p in populated}
        nested: dict = {}
        for path in module_paths:
            level = nested
            for seg in path:
                level = level.setdefault(seg, {})
        return cls(_freeze((), nested, populated_set))

    def node(self, module_path: Sequence[str]) -> ModuleNode | None:
        """Return the node at ``module_path`` or None."""
        current = self.root
        for seg in module_path:
            nxt = current.children.get(seg)
            if nxt is None:
                return None
            current = nxt
        return current

    def contains(self, module_path: Sequence[str]) -> bool:
        """Check whether ``module_path`` is a node of the tree."""
        return bool(module_path) and self.node(module_path) is not None

    def children(self, module_path: Sequence[str]) -> list[tuple[str, ...]]:
        """Paths of the immediate child modules, in sidebar order."""
        node = self.node(module_path)
        if node is None:
            return []
        return [child.path for child in node.children.values()]

    def walk(self) -> Iterator[ModuleNode]:
        """Depth-first, pre-order traversal of every non-root node."""
        stack = list(reversed(self.root.children.values()))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children.values()))

    def paths(self) -> list[tuple[str, ...]]:
        """Every module path in traversal order."""
        return [node.path for node in self.walk()]

    def __eq__(self, other: object) -> bool:
        """Compare trees structurally."""
        if not isinstance(other, ModuleTree):
            return NotImplemented
        return self.root == other.root

    def __hash__(self) -> int:
        """Trees are compared by value but never used as keys."""
        return hash(tuple(self.paths()))


def _freeze(
    path: tuple[str, ...], nested: dict, populated: set[tuple[str, ...]]
) -> ModuleNode:
    children = {}
    for seg in sorted(nested, key=item_sort_key):
        child_path = (*path, seg)
        children[seg] = _freeze(child_path, nested[seg], populated)
    return ModuleNode(
        path=path,
        documented=path in populated,
        children=MappingProxyType(children),
    )
