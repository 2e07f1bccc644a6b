from typing import Optional

import click

from pacl.cli import run_clone


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("identifier", metavar="REPOSITORY")
@click.argument("extra_args", nargs=-1, type=click.UNPROCESSED, metavar="[-- GIT_ARGS...]")
@click.option(
    "-b",
    "--base-dir",
    metavar="DIR",
    help="Base directory to clone into (default: $PACL_BASE_DIR, git config pacl.basedir, ~/.pacl)",
)
@click.option("-v", "--verbose", is_flag=True, help="Show debug output")
def pacl(
    identifier: str,
    extra_args: tuple[str, ...],
    base_dir: Optional[str],
    verbose: bool,
) -> None:
    """Clone REPOSITORY into BASE_DIR/<host>/<owner>/<repo>.

    REPOSITORY is owner/repo (GitHub), a full URL or user@host:path.
    Arguments after -- are passed to git clone unchanged.
    """
    run_clone(identifier, extra_args=extra_args, base_dir=base_dir, verbose=verbose)
