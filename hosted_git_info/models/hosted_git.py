from dataclasses import dataclass
from typing import Optional

from hosted_git_info.models.host import Host
from hosted_git_info.models.protocol import Protocol, display


@dataclass(frozen=True)
class HostedGit:
    """A git remote locator resolved to a known hosting provider.

    Built in one step by :meth:`parse` from any of the forms a git client
    accepts: SCP shorthand (``git@github.com:owner/repo``), full urls
    (``https://``, ``ssh://``, ``git://``, ``git+ssh://`` ...) and host
    shortcuts (``github:owner/repo``).
    """

    host: Host
    user: str
    password: Optional[str]
    project: str
    committish: Optional[str]
    protocol: Protocol

    @classmethod
    def parse(cls, raw: str) -> "HostedGit":
        # Imported here, the parsers depend on the models package
        from hosted_git_info.parsers.scp_parser import match_scp, parse_scp
        from hosted_git_info.parsers.url_parser import parse_url

        scp_parts = match_scp(raw)
        if scp_parts is not None:
            fields = parse_scp(scp_parts)
        else:
            fields = parse_url(raw)

        return cls(**fields)

    def get_default_representation(self) -> str:
        return display(self.protocol)
