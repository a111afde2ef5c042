"""Fully-qualified path of a documented item."""

from typing import NamedTuple

from navindex.kind import Kind


class ItemPath(NamedTuple):
    """Global uniqueness key: module path + item name + kind."""

    module_path: tuple[str, ...]
    name: str
    kind: Kind

    def display(self, separator: str = "::") -> str:
        """Render the path as it appears in documentation, e.g. guild::automod::Rule."""
        return separator.join((*self.module_path, self.name))

    def sort_key(self) -> tuple[tuple[str, ...], str, str]:
        """Key that orders paths without comparing Kind members directly."""
        return self.module_path, self.name, self.kind.value
