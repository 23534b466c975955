"""Command line: extract the image brushes of an ABR file as PNGs."""

import getopt
import itertools
import sys
from dataclasses import dataclass
from pathlib import Path

from .abr import open_abr
from .errors import (
    AbrupngError,
    BadCommandlineOptionsError,
    BrushError,
    CouldntCreateOutputDirError,
    CouldntGuessOutputNameError,
    CouldntOpenAbrError,
    CouldntOpenFileError,
    OpenError,
    SavePngError,
    WrongNumberOfInputFilesError,
)
from .pngwrite import save_greyscale

_BRIEF = (
    "Extracts image brushes from Adobe ABR files as PNGs.\n"
    "\n"
    "Usage:\n"
    "    abrupng INPUT [-o OUTPUT]"
)

_OPTIONS = (
    ("-o DIR", "set output directory (will be created)"),
    ("-h, --help", "print this help menu"),
)


@dataclass(frozen=True)
class HelpCommand:
    """Print the usage text."""


@dataclass(frozen=True)
class ProcessCommand:
    """Extract the brushes of ``input_path`` into ``output_path``."""

    input_path: Path
    output_path: Path


def usage():
    """Return the help text."""
    lines = [_BRIEF, "", "Options:"]
    lines.extend(f"    {flags:<20}{text}" for flags, text in _OPTIONS)
    return "\n".join(lines) + "\n"


def parse_cli_options(argv=None):
    """Parse command-line arguments into a command."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        opts, free = getopt.gnu_getopt(list(argv), "o:h", ["help"])
    except getopt.GetoptError as exc:
        raise BadCommandlineOptionsError(exc) from exc

    if any(name in ("-h", "--help") for name, _ in opts):
        return HelpCommand()

    if len(free) != 1:
        raise WrongNumberOfInputFilesError(len(free))
    input_path = Path(free[0])

    outputs = [value for name, value in opts if name == "-o"]
    if outputs:
        output_path = Path(outputs[0])
    else:
        # Guess from the input's stem, e.g. mybrushes.abr => ./mybrushes
        if input_path.name in ("", ".."):
            raise CouldntGuessOutputNameError()
        output_path = Path(input_path.stem)

    return ProcessCommand(input_path, output_path)


def process_brush(brush, save_path):
    """Save one brush as a PNG at ``save_path``."""
    save_greyscale(save_path, brush.data, brush.width, brush.height, brush.depth)


def process(input_path, output_path):
    """Extract every image brush of the ABR file into a new directory."""
    input_path = Path(input_path)
    output_path = Path(output_path)
    try:
        stream = open(input_path, "rb")
    except OSError as exc:
        raise CouldntOpenFileError(input_path, exc) from exc

    with stream:
        try:
            brushes = open_abr(stream)
        except OpenError as exc:
            raise CouldntOpenAbrError(exc) from exc

        try:
            output_path.mkdir()
        except OSError as exc:
            raise CouldntCreateOutputDirError(output_path, exc) from exc

        for idx in itertools.count():
            save_path = output_path / f"{idx}.png"
            try:
                brush = next(brushes)
            except StopIteration:
                break
            except BrushError as exc:
                print(f"error on brush {idx}: couldn't read brush: {exc}",
                      file=sys.stderr)
                continue
            try:
                process_brush(brush, save_path)
            except SavePngError as exc:
                print(f"error on brush {idx}: couldn't save PNG: {exc}",
                      file=sys.stderr)
            else:
                print(f"Wrote {save_path}.")


def report_error(err):
    """Print an error and, where possible, a hint at how to fix it."""
    print(f"error: {err}", file=sys.stderr)
    if isinstance(err, (BadCommandlineOptionsError, WrongNumberOfInputFilesError)):
        print("Use -h for help.", file=sys.stderr)
    elif isinstance(err, CouldntOpenAbrError):
        print(
            "Ensure the provided file was an ABR. If it was, "
            "it's unsupported, sorry :-(",
            file=sys.stderr,
        )
    elif isinstance(err, CouldntCreateOutputDirError) and isinstance(
        err.err, FileExistsError
    ):
        print(
            "The output directory will be created. Make sure "
            "it doesn't already exist.",
            file=sys.stderr,
        )


def main(argv=None):
    """Run the command line and return the exit status."""
    try:
        command = parse_cli_options(argv)
        if isinstance(command, HelpCommand):
            print(usage(), end="")
        else:
            process(command.input_path, command.output_path)
    except AbrupngError as err:
        report_error(err)
        return 1
    return 0