import sys
from typing import Optional, Sequence

from rich.markup import escape

from pacl.clients.git_client import GitClient
from pacl.config import resolve_base_dir
from pacl.errors import PaclError
from pacl.path_builder import build_clone_request
from pacl.resolver import resolve_identifier
from pacl.utils import setup_logging


def run_clone(
    identifier: str,
    extra_args: Sequence[str] = (),
    base_dir: Optional[str] = None,
    verbose: bool = False,
) -> None:
    logger = setup_logging(verbose)

    try:
        repository = resolve_identifier(identifier)
        logger.debug(f"Resolved '{identifier}' to {repository.full_path} on {repository.host}")

        base = resolve_base_dir(base_dir)
        logger.debug(f"Using base directory: {base}")

        request = build_clone_request(repository, base, extra_args)
        logger.info(f"Cloning {request.url} into {request.destination}")

        GitClient().clone(request)

    except PaclError as e:
        logger.error(escape(str(e)))
        sys.exit(e.exit_code)
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        sys.exit(1)
