from hosted_git_info.parsers.normalizers import (
    normalize_committish,
    normalize_project,
    split_auth,
)
from hosted_git_info.parsers.scp_parser import match_scp, parse_scp
from hosted_git_info.parsers.url_parser import parse_url

__all__ = [
    "match_scp",
    "normalize_committish",
    "normalize_project",
    "parse_scp",
    "parse_url",
    "split_auth",
]
