from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from rotorcipher.batch.config import MachineConfig, load_config, load_default_config
from rotorcipher.batch.session import SessionHeader, apply_header, log_step, process_lines
from rotorcipher.batch.common import format_groups
from rotorcipher.core.errors import EnigmaError

app = typer.Typer(help="rotorcipher: Enigma-class rotor machine simulator.")

log = logging.getLogger(__name__)

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"

_CONFIG_OPTION = typer.Option(
    None,
    "--config",
    "-c",
    envvar="ROTORCIPHER_CONFIG",
    help="Machine configuration file. Defaults to the bundled Enigma wheel set.",
)


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


def _load(config: Optional[Path]) -> MachineConfig:
    if config is None:
        return load_default_config()
    return load_config(config)


def _fail(e: EnigmaError | str) -> None:
    typer.echo(f"Error: {e}", err=True)
    raise typer.Exit(code=1)


@app.command()
def process(
    input_path: Optional[Path] = typer.Argument(None, metavar="INPUT", help="Messages to convert (default: stdin)."),
    output_path: Optional[Path] = typer.Argument(None, metavar="OUTPUT", help="Where to write results (default: stdout)."),
    config: Optional[Path] = _CONFIG_OPTION,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Trace every converted symbol."),
):
    """Convert a file of '*' setting lines and messages, printing groups of five."""
    configure_logging(verbose)
    try:
        machine = _load(config).build_machine(observer=log_step if verbose else None)
        if input_path is None:
            results = list(process_lines(machine, sys.stdin))
        else:
            try:
                src = input_path.open(encoding="utf-8")
            except OSError:
                _fail(f"could not open {input_path}")
            with src:
                results = list(process_lines(machine, src))
    except EnigmaError as e:
        _fail(e)

    text = "".join(line + "\n" for line in results)
    if output_path is None:
        typer.echo(text, nl=False)
    else:
        try:
            output_path.write_text(text, encoding="utf-8")
        except OSError:
            _fail(f"could not open {output_path}")
        log.debug("Wrote %d lines to %s", len(results), output_path)


@app.command()
def rotors(config: Optional[Path] = _CONFIG_OPTION):
    """List the rotors available in the configuration."""
    try:
        cfg = _load(config)
    except EnigmaError as e:
        _fail(e)
    typer.echo(f"alphabet={cfg.alphabet}  slots={cfg.num_rotors}  pawls={cfg.num_pawls}")
    for spec in cfg.rotors:
        notches = f"  notches={spec.notches}" if spec.notches else ""
        typer.echo(f"{spec.name:<8} {spec.kind.value:<9}{notches}")


@app.command()
def encode(
    text: str = typer.Argument(..., help="Message to encrypt or decrypt."),
    rotor_names: str = typer.Option(..., "--rotors", "-r", help='Rotor names, reflector first (e.g. "B Beta III IV I").'),
    setting: str = typer.Option(..., "--setting", "-s", help="Initial positions of the non-reflector rotors."),
    rings: Optional[str] = typer.Option(None, "--rings", help="Ring settings, same shape as --setting."),
    plugboard: str = typer.Option("", "--plugboard", "-p", help='Plugboard pairs in cycle notation, e.g. "(AB) (CD)".'),
    config: Optional[Path] = _CONFIG_OPTION,
    group: bool = typer.Option(True, "--group/--no-group", help="Print the result in groups of five."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Convert a single message with the given machine settings."""
    configure_logging(verbose)
    try:
        machine = _load(config).build_machine(observer=log_step if verbose else None)
        header = SessionHeader(
            rotors=tuple(rotor_names.split()),
            setting=setting,
            rings=rings,
            plugboard=plugboard,
        )
        apply_header(machine, header)
        result = machine.convert_message(text)
    except EnigmaError as e:
        _fail(e)
    typer.echo(format_groups(result) if group else result)


def main():
    app()


if __name__ == "__main__":
    main()
