import json
import logging
from pathlib import Path

import click

from .config import GeneratorConfig
from .errors import TypeGenError
from .generator import TypeGenerator
from .utils import snake_to_pascal_case


@click.command()
@click.option("--name", "-n", default=None, type=str, help="Root type name when the schema has no title")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--module", "-m", "module_name", default=None, type=str, help="F# module declared at the top of the output")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log resolution steps")
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def json_schema_to_fsharp(name, config, module_name, verbose, path, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    with open(path) as f:
        schema = json.load(f)

    if config is not None:
        with open(config) as f:
            config = GeneratorConfig.from_dict(json.load(f))
    else:
        config = GeneratorConfig()

    # CLI flag overrides config file
    if module_name:
        config.module_name = module_name

    if name is None:
        name = snake_to_pascal_case(Path(path).stem.split(".")[0])

    codegen = TypeGenerator(name, schema, config)
    try:
        out = codegen.generate()
    except TypeGenError as e:
        raise click.ClickException(str(e)) from e

    with open(output, "w") as f:
        f.write(out)
