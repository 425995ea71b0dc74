"""Translation models for the i18n engine.

Defines the locale value type, the translation tree union (Leaf | Node)
and the immutable session state swapped on every load.
"""

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union

_LANGUAGE = re.compile(r"[A-Za-z]{2,3}")
_SCRIPT = re.compile(r"[A-Za-z]{4}")
_REGION = re.compile(r"[A-Za-z]{2}|[0-9]{3}")


@dataclass(frozen=True)
class Locale:
    """Language plus optional region, compared by value.

    Attributes:
        language_code: ISO 639 language code (e.g., "en", "fr").
        region_code: Optional region/country code (e.g., "US", "CA").
    """

    language_code: str
    region_code: Optional[str] = None

    def __str__(self) -> str:
        """Return the underscore form used in resource names (e.g., "en_US")."""
        if self.region_code:
            return f"{self.language_code}_{self.region_code}"
        return self.language_code

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Parse a locale tag such as "en_US", "fr-CA", "es_419" or "zh_Hans_CN".

        The tag is language[_script][_region]. A script subtag is
        discarded, so "zh_Hans" parses as language-only "zh".

        Args:
            locale_str: Underscore or hyphen separated locale tag.

        Returns:
            Parsed Locale.

        Raises:
            ValueError: If the tag is empty, has more than three components,
                or a component is not a language (2-3 letters), script
                (4 letters) or region (2 letters or 3 digits) subtag where
                one is expected. Platform names such as
                "English_United States" are rejected.
        """
        parts = (locale_str or "").strip().replace("-", "_").split("_")
        language, rest = parts[0], parts[1:]
        if rest and _SCRIPT.fullmatch(rest[0]):
            rest = rest[1:]
        if (
            len(rest) > 1
            or not _LANGUAGE.fullmatch(language)
            or (rest and not _REGION.fullmatch(rest[0]))
        ):
            raise ValueError(f"Unparseable locale: {locale_str!r}")
        return cls(language_code=language, region_code=rest[0] if rest else None)


@dataclass(frozen=True)
class Leaf:
    """Terminal translation string."""

    value: str


@dataclass(frozen=True)
class Node:
    """Subtree of a translation tree.

    The children mapping is wrapped read-only on construction; a loaded
    tree is never mutated afterwards.

    Attributes:
        children: Mapping of key segment to Leaf or Node.
    """

    children: Mapping[str, "TreeValue"] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    @classmethod
    def empty(cls) -> "Node":
        return cls()

    def get(self, key: str) -> Optional["TreeValue"]:
        return self.children.get(key)

    def keys(self) -> Iterator[str]:
        return iter(self.children)

    def __contains__(self, key: object) -> bool:
        return key in self.children

    def __len__(self) -> int:
        return len(self.children)


TreeValue = Union[Leaf, Node]


@dataclass(frozen=True)
class SessionState:
    """Locale and tree owned by a translation session.

    Replaced as a whole on every load so readers never see a locale from one
    load paired with a tree from another.

    Attributes:
        locale: Effective locale, or None when detection failed.
        tree: Root of the active translation tree.
    """

    locale: Optional[Locale] = None
    tree: Node = field(default_factory=Node.empty)
