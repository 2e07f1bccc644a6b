import re
from urllib.parse import urlparse

from pacl.errors import InvalidIdentifier
from pacl.models import RepositoryIdentifier

DEFAULT_HOST = "github.com"

# user@host:path, as accepted by git for ssh remotes
SCP_LIKE_RE = re.compile(r"^(?P<userhost>[^@/:]+@[^/:]+):(?P<path>.+)$")


def resolve_identifier(token: str) -> RepositoryIdentifier:
    """Turn a user supplied repository reference into a RepositoryIdentifier.

    Accepted forms:
      owner/repo                       -> https://github.com/owner/repo
      group/subgroup/repo              -> https://github.com/group/subgroup/repo
      https://host/owner/repo[.git]    -> used as is, minus .git and trailing /
      ssh://git@host:2222/owner/repo   -> used as is, minus .git and trailing /
      git@host:owner/repo.git          -> ssh://git@host/owner/repo
    """
    identifier = token.strip()
    if not identifier:
        raise InvalidIdentifier(token, "empty identifier")

    if "://" not in identifier:
        scp_match = SCP_LIKE_RE.match(identifier)
        if scp_match:
            identifier = f"ssh://{scp_match.group('userhost')}/{scp_match.group('path')}"
        else:
            return _resolve_shorthand(token, identifier)

    return _resolve_url(token, identifier)


def _resolve_shorthand(token: str, identifier: str) -> RepositoryIdentifier:
    path = _split_path(token, identifier)
    owner, repo = _owner_and_repo(token, path)
    return RepositoryIdentifier(
        host=DEFAULT_HOST,
        owner=owner,
        repo=repo,
        url=f"https://{DEFAULT_HOST}/{owner}/{repo}",
    )


def _resolve_url(token: str, identifier: str) -> RepositoryIdentifier:
    try:
        parsed = urlparse(identifier)
        hostname = parsed.hostname
    except ValueError as e:
        raise InvalidIdentifier(token, str(e)) from e
    if not parsed.scheme or not hostname:
        raise InvalidIdentifier(token, "missing host")

    path = _split_path(token, parsed.path)
    owner, repo = _owner_and_repo(token, path)

    canonical = identifier.rstrip("/")
    while canonical.endswith(".git"):
        canonical = canonical[: -len(".git")].rstrip("/")

    return RepositoryIdentifier(host=hostname.lower(), owner=owner, repo=repo, url=canonical)


def _split_path(token: str, path: str) -> list[str]:
    segments = [segment for segment in path.strip("/").split("/") if segment]
    if segments:
        while segments[-1].endswith(".git"):
            segments[-1] = segments[-1][: -len(".git")]

    for segment in segments:
        if segment in (".", ".."):
            raise InvalidIdentifier(token, "path traversal is not allowed")
        if "\\" in segment or "\0" in segment:
            raise InvalidIdentifier(token, f"invalid path segment '{segment}'")

    return segments


def _owner_and_repo(token: str, path: list[str]) -> tuple[str, str]:
    if len(path) < 2 or not path[-1]:
        raise InvalidIdentifier(token, "expected at least owner/repo")

    return "/".join(path[:-1]), path[-1]
