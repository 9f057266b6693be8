from hosted_git_info.errors import ParseError, UnknownHost, UnknownProtocol, UnparseableUrl
from hosted_git_info.models import Host, HostedGit, Protocol

parse = HostedGit.parse

__all__ = [
    "Host",
    "HostedGit",
    "ParseError",
    "Protocol",
    "UnknownHost",
    "UnknownProtocol",
    "UnparseableUrl",
    "parse",
]
