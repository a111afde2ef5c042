"""The closed set of documented item kinds."""

from enum import Enum

from navindex.errors import UnknownKindError

_TYPE_LIKE = frozenset(
    {"struct", "enum", "union", "trait", "traitalias", "type", "primitive"}
)
_VALUE_LIKE = frozenset({"constant", "static"})
_MACRO_LIKE = frozenset({"macro", "attr", "derive"})

_TITLES = {
    "mod": "Modules",
    "struct": "Structs",
    "enum": "Enums",
    "union": "Unions",
    "trait": "Traits",
    "traitalias": "Trait Aliases",
    "type": "Type Aliases",
    "fn": "Functions",
    "macro": "Macros",
    "attr": "Attribute Macros",
    "derive": "Derive Macros",
    "constant": "Constants",
    "static": "Statics",
    "primitive": "Primitive Types",
    "keyword": "Keywords",
}


class Kind(Enum):
    """Category of a documented item; values are the sidebar wire tokens."""

    MODULE = "mod"
    STRUCT = "struct"
    ENUM = "enum"
    UNION = "union"
    TRAIT = "trait"
    TRAIT_ALIAS = "traitalias"
    TYPE_ALIAS = "type"
    FUNCTION = "fn"
    MACRO = "macro"
    ATTRIBUTE_MACRO = "attr"
    DERIVE_MACRO = "derive"
    CONSTANT = "constant"
    STATIC = "static"
    PRIMITIVE = "primitive"
    KEYWORD = "keyword"

    @classmethod
    def from_token(cls, token: str) -> "Kind":
        """Parse a wire token, rejecting anything that is not declared."""
        try:
            return cls(token.strip())
        except ValueError:
            raise UnknownKindError(token) from None

    @classmethod
    def declared(cls) -> tuple["Kind", ...]:
        """Return every kind in sidebar order."""
        return tuple(cls)

    @property
    def title(self) -> str:
        """Plural heading used for this kind's sidebar section."""
        return _TITLES[self.value]

    @property
    def search_rank(self) -> int:
        """Tie-break tier for search ranking (lower ranks first)."""
        if self.value in _TYPE_LIKE:
            return 0
        if self is Kind.FUNCTION:
            return 1
        if self.value in _VALUE_LIKE:
            return 2
        if self.value in _MACRO_LIKE:
            return 3
        return 4
