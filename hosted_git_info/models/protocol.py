from enum import Enum

from hosted_git_info.errors import UnknownProtocol
from hosted_git_info.models.host import Host


class Protocol(Enum):
    GIT_SSH = "git+ssh"
    GIT_HTTPS = "git+https"
    GIT_HTTP = "git+http"
    SSH = "ssh"
    HTTPS = "https"
    HTTP = "http"
    GIT = "git"
    SHORTCUT = "shortcut"


_SCHEMES: dict[str, Protocol] = {
    "git+ssh": Protocol.GIT_SSH,
    "git+https": Protocol.GIT_HTTPS,
    "git+http": Protocol.GIT_HTTP,
    "ssh": Protocol.SSH,
    "https": Protocol.HTTPS,
    "http": Protocol.HTTP,
    "git": Protocol.GIT,
}

_DISPLAY: dict[Protocol, str] = {
    Protocol.GIT_SSH: "sshurl",
    Protocol.SSH: "sshurl",
    Protocol.GIT_HTTPS: "https",
    Protocol.HTTPS: "https",
    Protocol.GIT_HTTP: "git+http",
    Protocol.HTTP: "http",
    Protocol.GIT: "git",
    Protocol.SHORTCUT: "shortcut",
}


def parse_protocol(token: str) -> Protocol:
    if Host.shortcut_for(token) is not None:
        return Protocol.SHORTCUT

    protocol = _SCHEMES.get(token)
    if protocol is None:
        raise UnknownProtocol(token)
    return protocol


def display(protocol: Protocol) -> str:
    return _DISPLAY[protocol]
