"""Domain sets used to scope triggers to request hosts."""

from dataclasses import dataclass
from typing import Iterable, Optional

SUBDOMAIN_MARKER = "*"


@dataclass(frozen=True)
class DomainSet:
    """Domains a trigger is constrained to.

    Entries in ``exact`` only match the identical host. Entries in
    ``subdomain`` match the identical host and any host below it.
    """

    exact: tuple[str, ...] = ()
    subdomain: tuple[str, ...] = ()

    @classmethod
    def from_domains(cls, domains: Iterable[str]) -> "DomainSet":
        """Build a domain set from raw strings.

        A leading ``*`` marks a subdomain entry; the marker is stripped.
        """
        exact: list[str] = []
        subdomain: list[str] = []
        for domain in domains:
            if domain.startswith(SUBDOMAIN_MARKER):
                subdomain.append(domain[len(SUBDOMAIN_MARKER):])
            else:
                exact.append(domain)
        return cls(exact=tuple(exact), subdomain=tuple(subdomain))

    def __len__(self) -> int:
        return len(self.exact) + len(self.subdomain)

    def to_domains(self) -> list[str]:
        """Return the raw domain strings this set was built from."""
        return list(self.exact) + [SUBDOMAIN_MARKER + d for d in self.subdomain]

    def matches(self, host: Optional[str]) -> bool:
        """Check if a host is covered by this domain set."""
        if host is None:
            return False
        if host in self.exact:
            return True
        return any(_is_same_or_subdomain(host, suffix) for suffix in self.subdomain)


def _is_same_or_subdomain(host: str, suffix: str) -> bool:
    """Check if host equals suffix or is a strict subdomain of it."""
    if host == suffix:
        return True
    if len(host) <= len(suffix) or not host.endswith(suffix):
        return False
    # "evil.com" must not match "notevil.com"
    return host[-len(suffix) - 1] == "."
