from enum import Enum
from typing import Optional

from hosted_git_info.errors import UnknownHost


class Host(Enum):
    GITHUB = "github"
    BITBUCKET = "bitbucket"
    GITLAB = "gitlab"
    GIST = "gist"

    @property
    def domain(self) -> str:
        return _DOMAINS[self]

    @classmethod
    def from_name(cls, name: str) -> "Host":
        host = _BY_NAME.get(name)
        if host is None:
            raise UnknownHost(name)
        return host

    @classmethod
    def from_domain(cls, domain: str) -> "Host":
        host = _BY_DOMAIN.get(domain)
        if host is None:
            raise UnknownHost(domain)
        return host

    @classmethod
    def shortcut_for(cls, token: str) -> Optional["Host"]:
        # A shortcut scheme is the provider's canonical name, e.g. "github:user/repo"
        return _BY_NAME.get(token)


_DOMAINS: dict[Host, str] = {
    Host.GITHUB: "github.com",
    Host.BITBUCKET: "bitbucket.org",
    Host.GITLAB: "gitlab.com",
    Host.GIST: "gist.github.com",
}

_BY_NAME: dict[str, Host] = {host.value: host for host in Host}

_BY_DOMAIN: dict[str, Host] = {domain: host for host, domain in _DOMAINS.items()}
