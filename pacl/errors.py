from typing import Optional


class PaclError(Exception):
    exit_code = 1


class InvalidIdentifier(PaclError, ValueError):
    exit_code = 2

    def __init__(self, identifier: str, reason: str):
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"Invalid repository identifier '{identifier}': {reason}")


class HomeDirectoryNotDetected(PaclError):
    def __init__(self) -> None:
        super().__init__("Home directory not detected, use --base-dir or PACL_BASE_DIR")


class ExternalCommandFailure(PaclError):
    """Raised when git could not be spawned or did not exit cleanly.

    ``returncode`` is the raw value reported by the process (negative when
    killed by a signal, None when it never started). ``exit_code`` is what
    pacl itself exits with.
    """

    def __init__(self, command: list[str], returncode: Optional[int], reason: str = ""):
        self.command = command
        self.returncode = returncode

        if returncode is None:
            self.exit_code = 127
            message = f"Could not run {command[0]}"
            if reason:
                message = f"{message}: {reason}"
        elif returncode < 0:
            self.exit_code = 128 - returncode
            message = f"Git terminated by signal {-returncode}"
        else:
            self.exit_code = returncode
            message = f"Git returned non-zero status code '{returncode}'"

        super().__init__(message)
