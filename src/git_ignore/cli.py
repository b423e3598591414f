"""CLI interface for git-ignore"""

import logging
from pathlib import Path
from typing import Optional

import click

from git_ignore.application.ignore_file_editor import ENCODING, ENCODING_ERRORS, IgnoreFileEditor
from git_ignore.domain.config.editor import EditorConfig
from git_ignore.domain.errors import IgnoreFileError, PatternValidationError
from git_ignore.domain.patterns import validate_pattern
from git_ignore.infrastructure.config.config_manager import ConfigManager, ConfigurationError

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration"""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    logging.getLogger().setLevel(level)
    for logger_name in logging.Logger.manager.loggerDict:
        if logger_name.startswith("git_ignore"):
            logging.getLogger(logger_name).setLevel(level)


def _die(message: str, verbose: bool = False, exc: Optional[Exception] = None) -> None:
    """Exit with a user-friendly error message"""
    if exc is not None:
        logger.error(message, exc_info=verbose)
    else:
        logger.error(message)
    raise click.ClickException(message)


class DefaultCommandGroup(click.Group):
    """Command group that falls back to a default sub-command

    `git-ignore '*.log'` is dispatched as `git-ignore add '*.log'`.
    """

    def __init__(self, *args, default_command: str = "add", **kwargs):
        super().__init__(*args, **kwargs)
        self.default_command = default_command

    def resolve_command(self, ctx, args):
        if args and args[0] not in self.commands:
            args = [self.default_command, *args]
        return super().resolve_command(ctx, args)


def editor_options(f):
    """Attach --global/--unique so they are accepted after the verb as well"""
    f = click.option("--unique", is_flag=True, help="Ensure patterns are unique")(f)
    f = click.option(
        "--global", "global_", is_flag=True, help="Operate on the global git ignore file"
    )(f)
    return f


def _create_editor(ctx: click.Context, global_: bool, unique: bool) -> IgnoreFileEditor:
    """Create the editor from loaded configuration and CLI flags

    Flags only switch options on; anything already enabled by the settings
    file or GIT_IGNORE_* variables stays enabled.

    Args:
        ctx: Click context carrying group level flags
        global_: --global given on the sub-command
        unique: --unique given on the sub-command

    Returns:
        IgnoreFileEditor instance
    """
    verbose = ctx.obj.get("verbose", False)
    try:
        config_manager = ConfigManager(config_path=ctx.obj.get("config_path"))
    except ConfigurationError as e:
        _die(str(e), verbose=verbose, exc=e)

    if config_manager.get_logging_config().verbose and not verbose:
        setup_logging(verbose=True)
        ctx.obj["verbose"] = True

    editor_config = config_manager.get_editor_config()
    config = EditorConfig(
        global_=editor_config.global_ or ctx.obj.get("global", False) or global_,
        unique=editor_config.unique or ctx.obj.get("unique", False) or unique,
    )
    logger.debug(f"Editor configuration: global={config.global_} unique={config.unique}")
    return IgnoreFileEditor(config)


def _check_pattern(ctx: click.Context, pattern: str) -> None:
    """Reject an empty pattern before any configuration or ignore file is read"""
    try:
        validate_pattern(pattern)
    except PatternValidationError as e:
        _die(f"Error running application: {e}", verbose=ctx.obj["verbose"], exc=e)


@click.group(cls=DefaultCommandGroup, default_command="add", no_args_is_help=False)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to .git-ignore.yml settings file",
)
@editor_options
@click.pass_context
def cli(ctx, verbose: bool, config: Path, global_: bool, unique: bool):
    """git-ignore - manage patterns in .gitignore

    Without a sub-command the argument is added as a new pattern.
    Options can also be set with GIT_IGNORE_GLOBAL, GIT_IGNORE_UNIQUE and
    GIT_IGNORE_VERBOSE.
    """
    ctx.ensure_object(dict)
    setup_logging(verbose)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose
    ctx.obj["global"] = global_
    ctx.obj["unique"] = unique


@cli.command()
@click.argument("pattern")
@editor_options
@click.pass_context
def add(ctx, pattern: str, global_: bool, unique: bool):
    """Add PATTERN as a new line of the ignore file."""
    _check_pattern(ctx, pattern)
    editor = _create_editor(ctx, global_, unique)
    try:
        editor.add(pattern)
    except IgnoreFileError as e:
        _die(f"Error running application: {e}", verbose=ctx.obj["verbose"], exc=e)


@cli.command()
@click.argument("pattern")
@editor_options
@click.pass_context
def remove(ctx, pattern: str, global_: bool, unique: bool):
    """Remove every line equal to PATTERN from the ignore file."""
    _check_pattern(ctx, pattern)
    editor = _create_editor(ctx, global_, unique)
    try:
        editor.remove(pattern)
    except IgnoreFileError as e:
        _die(f"Error running application: {e}", verbose=ctx.obj["verbose"], exc=e)


@cli.command(name="list")
@editor_options
@click.pass_context
def list_(ctx, global_: bool, unique: bool):
    """Print the patterns of the ignore file."""
    editor = _create_editor(ctx, global_, unique)
    try:
        lines = editor.list_patterns()
    except IgnoreFileError as e:
        _die(f"Error running application: {e}", verbose=ctx.obj["verbose"], exc=e)

    for line in lines:
        click.echo(line.encode(ENCODING, ENCODING_ERRORS))


def main():
    """Main entry point"""
    cli(obj={}, prog_name="git-ignore")


if __name__ == "__main__":
    main()
