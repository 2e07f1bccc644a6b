from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class CloneRequest:
    url: str
    destination: Path
    extra_args: tuple[str, ...] = field(default_factory=tuple)

    def to_command(self, git_executable: str = "git") -> list[str]:
        return [git_executable, "clone", self.url, str(self.destination), *self.extra_args]
