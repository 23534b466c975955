# abrupng

Extracts the image brushes stored in an Adobe ABR brush file and writes each
one out as a greyscale PNG.

Supported ABR versions are 1 and 2, and 6 and 10 with sub-version 1 or 2.
Only image brushes with 8-bit samples are extracted. Brushes that cannot be
read are reported and then skipped, so the remaining brushes are still written.

## Installation

```
pip install .
```

The package needs no third-party libraries.

## Command-line use

```
abrupng INPUT [-o OUTPUT]
```

- `INPUT` is the ABR file to read. Give exactly one.
- `-o OUTPUT` sets the output directory. It is created by the command and must
  not exist yet. If it is left out, the name is taken from the stem of the
  input file: `mybrushes.abr` produces `./mybrushes`.
- `-h`, `--help` prints usage.

The brushes are written to `OUTPUT/0.png`, `OUTPUT/1.png` and so on, in the
order they appear in the file. Each file written is reported as
`Wrote OUTPUT/N.png.`. A brush that cannot be read or saved is reported as
`error on brush N: ...` on standard error and its number is skipped. The exit
status is 0 on success and 1 when the command line is wrong, the input cannot
be opened, it is not a supported ABR file, or the output directory cannot be
created; in those cases an `error: ...` line is printed, with a hint where one
applies.

## Library use

```python
import itertools

from abrupng.abr import open_abr
from abrupng.errors import BrushError
from abrupng.pngwrite import save_greyscale

with open("mybrushes.abr", "rb") as stream:
    brushes = open_abr(stream)
    for index in itertools.count():
        try:
            brush = next(brushes)
        except StopIteration:
            break
        except BrushError as err:
            print(f"brush {index}: {err}")
            continue
        save_greyscale(f"{index}.png", brush.data, brush.width,
                       brush.height, brush.depth)
```

- `abrupng.abr.open_abr(stream)` reads the header of a seekable binary stream
  and returns a `Brushes` iterator. An unreadable or unsupported file raises
  `OpenError` (or its subclasses `UnsupportedVersionError` and
  `Found8bimError`).
- Each item of `Brushes` is an `ImageBrush`, a frozen dataclass with `width`,
  `height`, `depth` and row-major `data` bytes. A brush that cannot be read
  makes `next()` raise `BrushError` (or `UnsupportedBitDepthError` /
  `UnsupportedBrushTypeError`); iteration can then carry on with the next
  brush, unless the brush's own length could not be read, in which case
  iteration ends.
- `abrupng.rle.read_rle_data(stream, height, size_hint)` decodes the
  run-length compressed sample data used inside ABR files.
- `abrupng.pngwrite.encode_greyscale(data, width, height, depth)` returns PNG
  bytes; `save_greyscale(path, data, width, height, depth)` writes them to a
  file. Both accept bit depths of 1, 2, 4, 8 and 16 and raise
  `BadBitDepthError` for any other; a `data` length that does not match the
  image raises `SavePngError`, as do I/O failures when saving. The output
  file is created before the image is encoded.
- `abrupng.cli` holds the command line: `parse_cli_options`, `process`,
  `process_brush`, `report_error`, `usage` and `main`.

All exceptions derive from `abrupng.errors.AbrupngError`.

## Limitations

Only sampled (image) brushes are extracted; computed brushes and brushes with
sample depths other than 8 bits are reported as errors. Brush settings such as
spacing, names and antialiasing are skipped, and no other output format than
greyscale PNG is written.

## Running the tests

```
pip install .[test]
pytest
```