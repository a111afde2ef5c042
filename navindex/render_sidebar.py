"""Logic for building the sidebar navigation tree of a module."""

from collections.abc import Sequence
from dataclasses import dataclass

from navindex.errors import UnknownModuleError
from navindex.global_index import GlobalIndex
from navindex.item_path import ItemPath
from navindex.kind import Kind


@dataclass(frozen=True)
class SidebarBucket:
    """A non-empty kind section of the sidebar."""

    kind: Kind
    title: str
    items: tuple[ItemPath, ...]


@dataclass(frozen=True)
class SidebarNode:
    """Navigation tree rooted at one module.

    ``children`` are module paths of the immediate child modules; callers
    render them with another ``render_sidebar`` call.
    """

    module_path: tuple[str, ...]
    buckets: tuple[SidebarBucket, ...]
    children: tuple[tuple[str, ...], ...]
    documented: bool = True

    def as_dict(self, index: GlobalIndex, separator: str = "::") -> dict:
        """Plain-data form for the page-rendering collaborator."""
        return {
            "module": separator.join(self.module_path),
            "documented": self.documented,
            "sections": [
                {
                    "kind": bucket.kind.value,
                    "title": bucket.title,
                    "items": [
                        {
                            "name": path.name,
                            "path": path.display(separator),
                            "summary": index.record(path).summary,
                        }
                        for path in bucket.items
                    ],
                }
                for bucket in self.buckets
            ],
            "children": [separator.join(child) for child in self.children],
        }


def render_sidebar(index: GlobalIndex, module_path: Sequence[str]) -> SidebarNode:
    """Return the sidebar for ``module_path``, hiding empty kind buckets."""
    module = tuple(module_path)
    node = index.module_tree.node(module) if module else None
    if node is None:
        raise UnknownModuleError(module)

    buckets = []
    for kind in Kind.declared():
        items = index.bucket(module, kind)
        if items:
            buckets.append(SidebarBucket(kind=kind, title=kind.title, items=items))

    return SidebarNode(
        module_path=module,
        buckets=tuple(buckets),
        children=tuple(index.module_tree.children(module)),
        documented=node.documented,
    )


def render_sidebar_tree(index: GlobalIndex) -> list[SidebarNode]:
    """Render the sidebar of every module in depth-first order."""
    return [render_sidebar(index, path) for path in index.module_tree.paths()]
