from hosted_git_info.models.host import Host
from hosted_git_info.models.protocol import Protocol
from hosted_git_info.models.hosted_git import HostedGit

__all__ = ["Host", "Protocol", "HostedGit"]
