from dataclasses import dataclass


@dataclass(frozen=True)
class RepositoryIdentifier:
    host: str
    owner: str
    repo: str
    url: str

    @property
    def full_path(self) -> str:
        return f"{self.owner}/{self.repo}"
