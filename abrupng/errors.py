"""Exceptions raised while reading ABR files and writing brushes out."""

import os


class AbrupngError(Exception):
    """Base class for every error raised by this package."""


class OpenError(AbrupngError):
    """A stream could not be opened as an ABR file."""


class UnsupportedVersionError(OpenError):
    """The ABR header names a version this package cannot read."""

    def __init__(self, version, subversion):
        super().__init__(f"unknown/unsupported version: {version}.{subversion}")
        self.version = version
        self.subversion = subversion


class Found8bimError(OpenError):
    """A lower-case '8bim' signature was met while looking for samples."""

    def __init__(self):
        super().__init__("found 8bim")


class BrushError(AbrupngError):
    """A single brush could not be read."""


class UnsupportedBitDepthError(BrushError):
    """The brush uses a bit depth other than 8."""

    def __init__(self, depth):
        super().__init__(f"unsupported bit-depth, {depth}-bit")
        self.depth = depth


class UnsupportedBrushTypeError(BrushError):
    """The brush is not an image (sampled) brush."""

    def __init__(self, brush_type):
        super().__init__(f"unsupported brush type: {brush_type}")
        self.brush_type = brush_type


class SavePngError(AbrupngError):
    """A brush could not be written as a PNG."""


class BadBitDepthError(SavePngError):
    """The bit depth cannot be expressed in a greyscale PNG."""

    def __init__(self, depth):
        super().__init__(f"bad bit-depth: {depth}")
        self.depth = depth


class BadCommandlineOptionsError(AbrupngError):
    """The command line could not be parsed."""

    def __init__(self, reason):
        super().__init__(f"bad command-line option: {reason}")
        self.reason = reason


class WrongNumberOfInputFilesError(AbrupngError):
    """Anything other than exactly one input file was given."""

    def __init__(self, num):
        super().__init__(f"expected exactly one input file but got {num}")
        self.num = num


class CouldntOpenFileError(AbrupngError):
    """The input file could not be opened."""

    def __init__(self, file_path, err):
        super().__init__(f"couldn't open file {os.fspath(file_path)}: {err}")
        self.file_path = file_path
        self.err = err


class CouldntOpenAbrError(AbrupngError):
    """The input file was opened but is not a readable ABR file."""

    def __init__(self, err):
        super().__init__(f"couldn't open as ABR: {err}")
        self.err = err


class CouldntGuessOutputNameError(AbrupngError):
    """No output directory was given and none could be derived."""

    def __init__(self):
        super().__init__("couldn't guess output name from input")


class CouldntCreateOutputDirError(AbrupngError):
    """The output directory could not be created."""

    def __init__(self, output_path, err):
        super().__init__(
            f"couldn't create output directory {os.fspath(output_path)}: {err}"
        )
        self.output_path = output_path
        self.err = err