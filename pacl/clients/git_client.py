import logging
import shlex
import signal
import subprocess

from git import Git

from pacl.errors import ExternalCommandFailure
from pacl.models import CloneRequest
from pacl.utils import echo_command

logger = logging.getLogger("pacl")


class GitClient:
    """Run `git clone` for a CloneRequest, printing the command first."""

    def __init__(self, git_executable: str = ""):
        self.git_executable = git_executable or str(Git.GIT_PYTHON_GIT_EXECUTABLE or "git")

    def build_command(self, request: CloneRequest) -> list[str]:
        return request.to_command(self.git_executable)

    def format_command(self, request: CloneRequest) -> str:
        return shlex.join(self.build_command(request))

    def clone(self, request: CloneRequest) -> None:
        command = self.build_command(request)
        echo_command(self.format_command(request))

        try:
            # stdin/stdout/stderr are inherited so git can prompt and report progress
            result = subprocess.run(command, check=False)
        except KeyboardInterrupt as e:
            # git received the same SIGINT from the terminal
            raise ExternalCommandFailure(command, -signal.SIGINT) from e
        except OSError as e:
            raise ExternalCommandFailure(command, None, str(e)) from e

        logger.debug(f"{self.git_executable} exited with {result.returncode}")
        if result.returncode != 0:
            raise ExternalCommandFailure(command, result.returncode)
