from typing import Optional
from urllib.parse import SplitResult, urlsplit

from hosted_git_info.errors import UnknownHost, UnparseableUrl
from hosted_git_info.models.host import Host
from hosted_git_info.models.protocol import Protocol, parse_protocol
from hosted_git_info.parsers.normalizers import normalize_committish, normalize_project


def parse_url(raw: str) -> dict:
    parsed = _split(raw)

    protocol = parse_protocol(parsed.scheme)

    if protocol is Protocol.SHORTCUT:
        # Shortcut urls ("github:user/repo") carry the host in the scheme
        host = Host.shortcut_for(parsed.scheme)
        if host is None:
            raise UnknownHost(parsed.scheme)
    else:
        if not parsed.hostname:
            raise UnparseableUrl(raw, "missing host")
        host = Host.from_domain(parsed.hostname)

    return {
        "host": host,
        "user": parsed.username or "",
        "password": parsed.password,
        "project": normalize_project(parsed.path),
        "committish": normalize_committish(_raw_committish(parsed)),
        "protocol": protocol,
    }


def _split(raw: str) -> SplitResult:
    try:
        parsed = urlsplit(raw)
        # Accessing the port validates it; urlsplit itself is lazy about it
        parsed.port
    except ValueError as e:
        raise UnparseableUrl(raw, str(e)) from e

    if not parsed.scheme:
        raise UnparseableUrl(raw, "missing scheme")

    return parsed


def _raw_committish(parsed: SplitResult) -> Optional[str]:
    if parsed.fragment:
        return f"#{parsed.fragment}"
    if parsed.query:
        return f"?{parsed.query}"
    return None
