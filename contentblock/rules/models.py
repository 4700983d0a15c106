"""Data models for the rules system."""

import re
from dataclasses import dataclass
from typing import ClassVar, Iterator, Optional, Union

from ..models.request import LoadType, Request, ResourceType
from .domains import DomainSet


@dataclass(frozen=True)
class AllResourceTypes:
    """Matches every resource type."""

    def __contains__(self, resource_type: ResourceType) -> bool:
        return True


@dataclass(frozen=True)
class ResourceTypeList:
    """Matches only the listed resource types."""

    types: frozenset[ResourceType]

    def __contains__(self, resource_type: ResourceType) -> bool:
        return resource_type in self.types


ResourceTypeSet = Union[AllResourceTypes, ResourceTypeList]


@dataclass(frozen=True)
class IfDomain:
    """Only trigger if the request host is in the domain set."""

    domains: DomainSet

    kind: ClassVar[str] = "if-domain"

    def permits(self, host: Optional[str]) -> bool:
        return self.domains.matches(host)


@dataclass(frozen=True)
class UnlessDomain:
    """Trigger unless the request host is in the domain set."""

    domains: DomainSet

    kind: ClassVar[str] = "unless-domain"

    def permits(self, host: Optional[str]) -> bool:
        return not self.domains.matches(host)


DomainConstraint = Union[IfDomain, UnlessDomain]


@dataclass(frozen=True)
class Trigger:
    """Conditions that determine whether a rule's action is performed."""

    url_filter: re.Pattern[str]
    resource_types: ResourceTypeSet = AllResourceTypes()
    load_type: Optional[LoadType] = None
    domain_constraint: Optional[DomainConstraint] = None

    @property
    def is_case_sensitive(self) -> bool:
        """Check if the url filter was compiled case sensitive."""
        return not self.url_filter.flags & re.IGNORECASE

    def matches(self, request: Request) -> bool:
        """Check if this trigger applies to the given request.

        The domain constraint is only consulted once the url filter matched.
        """
        if request.resource_type not in self.resource_types:
            return False
        if self.load_type is not None and request.load_type != self.load_type:
            return False
        if self.url_filter.search(request.canonical_url) is None:
            return False
        if self.domain_constraint is None:
            return True
        return self.domain_constraint.permits(request.host)


@dataclass(frozen=True)
class Block:
    """Prevent the network request from starting."""

    kind: ClassVar[str] = "block"


@dataclass(frozen=True)
class BlockCookies:
    """Remove any HTTP cookies from the request before starting it."""

    kind: ClassVar[str] = "block-cookies"


@dataclass(frozen=True)
class CssDisplayNone:
    """Hide elements of the requesting page matching a CSS selector."""

    selector: str

    kind: ClassVar[str] = "css-display-none"


@dataclass(frozen=True)
class IgnorePreviousRules:
    """Discard the reactions of every previously triggered rule."""

    kind: ClassVar[str] = "ignore-previous-rules"


Action = Union[Block, BlockCookies, CssDisplayNone, IgnorePreviousRules]


@dataclass(frozen=True)
class Rule:
    """A trigger paired with the action to take when it fires."""

    trigger: Trigger
    action: Action


@dataclass(frozen=True)
class RuleSet:
    """Ordered, immutable collection of validated rules.

    Order decides both matching order and which reactions a later
    ``ignore-previous-rules`` action discards.
    """

    rules: tuple[Rule, ...] = ()

    def __len__(self) -> int:
        return len(self.rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __getitem__(self, index: int) -> Rule:
        return self.rules[index]
