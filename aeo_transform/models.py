from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from aeo_transform.markup import typed
from aeo_transform.tree import child


@dataclass(frozen=True)
class TransformOutput:
    """Result of transforming one document."""
    html: str
    json_ld: Dict[str, Any]
    meta: Dict[str, str] = field(default_factory=dict)

    @property
    def title(self) -> Optional[str]:
        return self.meta.get("title")

    @property
    def description(self) -> Optional[str]:
        return self.meta.get("description")

    def to_dict(self) -> Dict[str, Any]:
        return {"html": self.html, "jsonLd": self.json_ld, "meta": dict(self.meta)}


def make_meta(title: Any = None, description: Any = None) -> Dict[str, str]:
    """Build a meta mapping holding only the fields that are present."""
    meta = {}
    if title is not None:
        meta["title"] = str(title)
    if description is not None:
        meta["description"] = str(description)
    return meta


@dataclass(frozen=True)
class Author:
    """An article author: either a Person or an Organization."""
    kind: str
    name: Any = None
    url: Any = None

    KINDS = ("Person", "Organization")

    @classmethod
    def from_node(cls, node: Any) -> Optional["Author"]:
        """Pick the variant from whichever child key is present, Person first."""
        for kind in cls.KINDS:
            variant = child(node, kind)
            if variant:
                return cls(kind=kind, name=child(variant, "name"), url=child(variant, "url"))
        return None

    def to_jsonld(self) -> Dict[str, Any]:
        return typed(self.kind, name=self.name, url=self.url)
