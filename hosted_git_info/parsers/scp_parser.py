import re
from typing import NamedTuple, Optional

from hosted_git_info.models.host import Host
from hosted_git_info.models.protocol import Protocol
from hosted_git_info.parsers.normalizers import (
    normalize_committish,
    normalize_project,
    split_auth,
)

# auth@host:[/]path[.git][#fragment]
# auth is greedy so it ends at the last "@"; it may not contain "/" which keeps
# "scheme://user@host:port/..." URLs out of this form.
SCP_PATTERN = re.compile(
    r"(?P<auth>[^/]+)@(?P<host>[^@:/\n]+):/?(?P<path>[^#\n]+?)(?:\.git)?(?P<fragment>#.*)?"
)


class ScpParts(NamedTuple):
    auth: str
    host: str
    path: str
    fragment: Optional[str]


def match_scp(raw: str) -> Optional[ScpParts]:
    match = SCP_PATTERN.fullmatch(raw)
    if match is None:
        return None

    return ScpParts(
        auth=match.group("auth"),
        host=match.group("host"),
        path=match.group("path"),
        fragment=match.group("fragment"),
    )


def parse_scp(parts: ScpParts) -> dict:
    user, password = split_auth(parts.auth)

    return {
        "host": Host.from_domain(parts.host),
        "user": user,
        "password": password,
        "project": normalize_project(f"/{parts.path}"),
        "committish": normalize_committish(parts.fragment),
        "protocol": Protocol.GIT_SSH,
    }
