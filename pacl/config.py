import os
import re
from pathlib import Path
from typing import Optional

from git import GitConfigParser

from pacl.errors import HomeDirectoryNotDetected

BASE_DIR_ENV = "PACL_BASE_DIR"
BASE_DIR_CONFIG_KEY = "pacl.basedir"
DEFAULT_BASE_DIR_NAME = ".pacl"


def get_git_config(key: str, default: str = "") -> str:
    try:
        config = GitConfigParser()
        section, option = _parse_config_key(key)

        value = config.get_value(section, option, default=default)

        # Support env(ENV_VAR) syntax
        if isinstance(value, str):
            env_match = re.match(r"^env\(([A-Z_][A-Z0-9_]*)\)$", value)
            if env_match:
                env_var = env_match.group(1)
                return os.getenv(env_var, default)

        return str(value)
    except Exception:
        return default


def _parse_config_key(key: str) -> tuple[str, str]:
    # Git config splits on the LAST dot:
    # "pacl.github.com.basedir" -> section='pacl "github.com"', option="basedir"
    parts = key.rsplit(".", 1)
    if len(parts) != 2:
        raise ValueError(f"Invalid config key: {key}")

    section_parts = parts[0].split(".", 1)
    if len(section_parts) == 2:
        section = f'{section_parts[0]} "{section_parts[1]}"'
    else:
        section = section_parts[0]

    option = parts[1]
    return section, option


def default_base_dir() -> Path:
    try:
        home = Path.home()
    except RuntimeError as e:
        raise HomeDirectoryNotDetected() from e
    # older Pythons hand back "~" unexpanded instead of raising
    if home == Path("~"):
        raise HomeDirectoryNotDetected()
    return home / DEFAULT_BASE_DIR_NAME


def resolve_base_dir(cli_value: Optional[str] = None) -> Path:
    """Pick the directory every clone is mirrored under.

    First match wins: --base-dir, $PACL_BASE_DIR, `git config pacl.basedir`,
    then ~/.pacl.
    """
    for candidate in (cli_value, os.getenv(BASE_DIR_ENV), get_git_config(BASE_DIR_CONFIG_KEY)):
        if candidate:
            try:
                return Path(candidate).expanduser()
            except RuntimeError as e:
                raise HomeDirectoryNotDetected() from e

    return default_base_dir()
