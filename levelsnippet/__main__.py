"writes an html list item describing a bedrock world, linking to its rendered maps"

import sys
import logging
from pathlib import Path

if __package__ is None:
    print(
        'Please run this as a module, use "python -m levelsnippet" instead of "python __main__.py"',
        file=sys.stderr,
    )
    sys.exit(1)

import click

from .classes import World
from .maps import find_map_links
from .nbt import FormatError
from .snippet import world_fragment

logger = logging.getLogger(__name__)

FORMAT_ERROR_EXIT = 2


class SnippetCommand(click.Command):
    "usage errors exit with 1, leaving 2 for files that can't be decoded"

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.MissingParameter as error:
            if error.param is not None and error.param.param_type_name == "argument":
                error = click.UsageError(
                    f'Argument "{error.param.human_readable_name}" is required',
                    ctx=ctx,
                )
            error.exit_code = 1
            raise error from None
        except click.UsageError as error:
            error.exit_code = 1
            raise


def configure_logging(verbose: bool, log_file: Path | None) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    # stdout is reserved for the snippet
    if log_file is None:
        logging.basicConfig(level=level, force=True)
    else:
        logging.basicConfig(filename=log_file, level=level, force=True)


@click.command(cls=SnippetCommand)
@click.argument(
    "level_file",
    metavar="LEVEL_FILE",
    type=click.Path(exists=True, path_type=Path),
)
@click.option(
    "-w",
    "--world-name",
    "--level-name",
    "world_name",
    envvar="LEVELSNIPPET_WORLD_NAME",
    help="Displayable name for world",
)
@click.option(
    "-p",
    "--world-path",
    envvar="LEVELSNIPPET_WORLD_PATH",
    help="Web path for world",
)
@click.option(
    "--base-path",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="LEVELSNIPPET_BASE_PATH",
    help="Root path of site on local disk (defaults to the current directory)",
)
@click.option("-v", "--verbose", is_flag=True, help="Log debugging information")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="LEVELSNIPPET_LOG_FILE",
    help="Write the log to a file instead of stderr",
)
def main(
    level_file: Path,
    world_name: str | None,
    world_path: str | None,
    base_path: Path | None,
    verbose: bool = False,
    log_file: Path | None = None,
) -> None:
    configure_logging(verbose, log_file)
    if base_path is None:
        base_path = Path.cwd()

    try:
        world = World.load(
            level_file, name=world_name, path=world_path, base_path=base_path
        )
    except FormatError as error:
        logger.debug(f"could not decode {level_file}", exc_info=True)
        print(f"Error: {error}", file=sys.stderr)
        sys.exit(FORMAT_ERROR_EXIT)
    except OSError as error:
        logger.exception(f"could not read {level_file}")
        failed = level_file if error.filename is None else error.filename
        raise click.FileError(
            str(failed), hint=error.strerror or str(error)
        ) from error
    logger.info(f"World name: {world.name}")

    links = find_map_links(world.directory, world.path)
    click.echo(world_fragment(world, links).to_string())


if __name__ == "__main__":
    main()

# Licensed under the MIT License
# Copyright (c) 2024 Anonymous941
# See the LICENSE file for more information.
