import json
import logging

import click

from . import __version__
from .builders import FragmentBuilder
from .cli_utils import reconstruct_command_line, render_generation_comment
from .config import EmitterConfig
from .description import build_source_file
from .errors import CodegenError
from .ts_ast.printer import Printer

logger = logging.getLogger(__name__)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--header", is_flag=True, default=False, help="Prepend a generation comment to the output")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log fragment construction to stderr")
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
@click.argument("output", required=False, default=None, type=click.Path(resolve_path=True))
def ts_codegen(config, header, verbose, path, output):
    """Render the TypeScript fragments described in the JSON file PATH."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    with open(path) as f:
        description = json.load(f)

    if config is not None:
        with open(config) as f:
            try:
                config = EmitterConfig.from_dict(json.load(f))
            except ValueError as e:
                raise click.BadParameter(str(e), param_hint="--config") from e
    else:
        config = EmitterConfig()

    # CLI flag overrides config file if set
    if header:
        config.add_generation_comment = True

    try:
        source_file = build_source_file(description, FragmentBuilder(config))
    except CodegenError as e:
        raise click.ClickException(str(e)) from e
    logger.info(f"Built {len(source_file.statements)} fragment(s) from {path}")

    printer = Printer.from_config(config)
    parts = []
    if config.add_generation_comment:
        parts.append(render_generation_comment(reconstruct_command_line(ts_codegen), __version__))
    parts.append(printer.print_file(source_file))
    out = config.new_line.value.join(parts) + config.new_line.value

    if output is None:
        click.echo(out, nl=False)
        return

    with open(output, "w", newline="") as f:
        f.write(out)
    logger.info(f"Wrote {output}")
