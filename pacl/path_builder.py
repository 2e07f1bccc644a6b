from pathlib import Path
from typing import Sequence

from pacl.models import CloneRequest, RepositoryIdentifier


def build_destination(identifier: RepositoryIdentifier, base_dir: Path) -> Path:
    return Path(base_dir).joinpath(identifier.host, *identifier.owner.split("/"), identifier.repo)


def build_clone_request(
    identifier: RepositoryIdentifier, base_dir: Path, extra_args: Sequence[str] = ()
) -> CloneRequest:
    return CloneRequest(
        url=identifier.url,
        destination=build_destination(identifier, base_dir),
        extra_args=tuple(extra_args),
    )
