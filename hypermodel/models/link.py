from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Union
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from hypermodel.errors import ExpansionError


# -----------------------------------------------------------------------------
# Link relations
# -----------------------------------------------------------------------------
class LinkRelation(BaseModel):
    """Case-sensitive name of the role a link plays ("self", "author", ...)."""

    value: str = Field(
        ...,
        min_length=1,
        description="Relation name, compared case-sensitively"
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, relation: Union[str, "LinkRelation"]) -> "LinkRelation":
        """Return the interned relation for the given name."""
        if isinstance(relation, LinkRelation):
            return relation

        interned = _RELATIONS.get(relation)
        if interned is None:
            interned = cls(value=relation)
            _RELATIONS[relation] = interned
        return interned

    def __str__(self) -> str:
        return self.value


_RELATIONS: Dict[str, LinkRelation] = {}

SELF = LinkRelation.of("self")
COLLECTION = LinkRelation.of("collection")
ITEM = LinkRelation.of("item")
FIRST = LinkRelation.of("first")
PREV = LinkRelation.of("prev")
NEXT = LinkRelation.of("next")
LAST = LinkRelation.of("last")


# -----------------------------------------------------------------------------
# Links
# -----------------------------------------------------------------------------
_EXPRESSION = re.compile(r"\{([^{}]*)\}")
_VARIABLE = re.compile(r"[A-Za-z0-9_][A-Za-z0-9_.]*")

_NON_SCALARS = (list, tuple, set, frozenset, dict)


class Link(BaseModel):
    rel: LinkRelation = Field(
        default_factory=lambda: SELF,
        description="Relation this link plays for its containing resource"
    )
    href: str = Field(
        ...,
        description="Target URI, possibly a URI template such as /products/{id}"
    )
    title: Optional[str] = Field(None, description="Human readable label")
    name: Optional[str] = Field(None, description="Secondary key among links sharing a relation")
    type: Optional[str] = Field(None, description="Media type hint for the target")
    hreflang: Optional[str] = Field(None, description="Language of the target resource")
    profile: Optional[str] = Field(None, description="Profile URI of the target")
    deprecation: Optional[str] = Field(None, description="URI explaining the link's deprecation")
    method: Optional[str] = Field(None, description="HTTP method, e.g. GET, POST, PATCH, DELETE")

    model_config = ConfigDict(frozen=True)

    @field_validator("rel", mode="before")
    @classmethod
    def coerce_relation(cls, v: Any) -> Any:
        if isinstance(v, str):
            return LinkRelation.of(v)
        return v

    @classmethod
    def of(cls, href: str, relation: Union[str, LinkRelation, None] = None) -> "Link":
        """Create a link to href, defaulting to the self relation."""
        if relation is None:
            return cls(href=href)
        return cls(href=href, rel=LinkRelation.of(relation))

    @computed_field  # type: ignore[misc]
    @property
    def templated(self) -> bool:
        return _EXPRESSION.search(self.href) is not None

    @property
    def variables(self) -> List[str]:
        """Distinct template variable names in order of first appearance."""
        names: List[str] = []
        for expression in _EXPRESSION.findall(self.href):
            if _VARIABLE.fullmatch(expression) and expression not in names:
                names.append(expression)
        return names

    def has_rel(self, relation: Union[str, LinkRelation]) -> bool:
        return self.rel == LinkRelation.of(relation)

    def with_rel(self, relation: Union[str, LinkRelation]) -> "Link":
        return self.model_copy(update={"rel": LinkRelation.of(relation)})

    def with_self_rel(self) -> "Link":
        return self.with_rel(SELF)

    def with_title(self, title: Optional[str]) -> "Link":
        return self.model_copy(update={"title": title})

    def expand(self, *args: Any, **kwargs: Any) -> "Link":
        """
        Bind template variables and return the resulting, untemplated link.

        Values bind positionally in order of first appearance, or by name.
        Every variable must be bound exactly once; anything else raises
        ExpansionError. Only simple {name} expressions are supported.
        """
        if args and kwargs:
            raise ExpansionError("Cannot mix positional and named template values", self.href)

        for expression in _EXPRESSION.findall(self.href):
            if not _VARIABLE.fullmatch(expression):
                raise ExpansionError(
                    f"Unsupported template expression '{{{expression}}}' in {self.href}",
                    self.href,
                )

        names = self.variables

        if kwargs:
            missing = [name for name in names if name not in kwargs]
            unknown = [name for name in kwargs if name not in names]
            if missing or unknown:
                raise ExpansionError(
                    f"Template {self.href} expects {names}; missing {missing}, unknown {unknown}",
                    self.href,
                )
            values = dict(kwargs)
        else:
            if len(args) != len(names):
                raise ExpansionError(
                    f"Template {self.href} has {len(names)} variable(s) but {len(args)} value(s) were given",
                    self.href,
                )
            values = dict(zip(names, args))

        for name, value in values.items():
            if value is None or isinstance(value, _NON_SCALARS):
                raise ExpansionError(
                    f"Cannot expand '{name}' with value of type {type(value).__name__}",
                    self.href,
                )

        href = _EXPRESSION.sub(lambda m: quote(str(values[m.group(1)]), safe=""), self.href)
        return self.model_copy(update={"href": href})

    def __str__(self) -> str:
        return f'<{self.href}>;rel="{self.rel}"'
