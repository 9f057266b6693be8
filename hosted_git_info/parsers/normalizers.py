from typing import Optional


def split_auth(raw: str) -> tuple[str, Optional[str]]:
    """Split a ``user[:password]`` string on its first colon."""
    user, sep, password = raw.partition(":")
    if not sep:
        return raw, None
    return user, password


def normalize_project(path: str) -> str:
    """Turn ``/owner/repo.git`` into ``owner/repo``.

    All leading slashes and trailing ``.git`` suffixes are removed, so the
    result may still contain internal slashes (``group/subgroup/repo``).
    Applying it to an already normalized project leaves the value unchanged.
    """
    project = path.lstrip("/")
    while project.endswith(".git"):
        project = project.removesuffix(".git")
    return project


def normalize_committish(raw: Optional[str]) -> Optional[str]:
    """Strip the leading ``#`` or ``?`` from a raw fragment or query."""
    if raw is None:
        return None

    committish = raw[1:]
    return committish or None
