import pytest

from abrupng.errors import (
    AbrupngError,
    BadBitDepthError,
    BadCommandlineOptionsError,
    BrushError,
    CouldntCreateOutputDirError,
    CouldntGuessOutputNameError,
    CouldntOpenAbrError,
    CouldntOpenFileError,
    Found8bimError,
    OpenError,
    SavePngError,
    UnsupportedBitDepthError,
    UnsupportedBrushTypeError,
    UnsupportedVersionError,
    WrongNumberOfInputFilesError,
)


def test_unsupported_version_message_and_fields():
    err = UnsupportedVersionError(7, 3)
    assert str(err) == "unknown/unsupported version: 7.3"
    assert (err.version, err.subversion) == (7, 3)
    assert isinstance(err, OpenError)


def test_found_8bim_message():
    err = Found8bimError()
    assert str(err) == "found 8bim"
    assert isinstance(err, OpenError)


def test_unsupported_bit_depth_message():
    err = UnsupportedBitDepthError(16)
    assert str(err) == "unsupported bit-depth, 16-bit"
    assert err.depth == 16
    assert isinstance(err, BrushError)


def test_unsupported_brush_type_message():
    err = UnsupportedBrushTypeError(1)
    assert str(err) == "unsupported brush type: 1"
    assert err.brush_type == 1
    assert isinstance(err, BrushError)


def test_bad_bit_depth_is_save_png_error():
    err = BadBitDepthError(3)
    assert str(err) == "bad bit-depth: 3"
    assert isinstance(err, SavePngError)


def test_command_line_errors():
    assert str(BadCommandlineOptionsError("oops")) == "bad command-line option: oops"
    err = WrongNumberOfInputFilesError(2)
    assert str(err) == "expected exactly one input file but got 2"
    assert err.num == 2


def test_open_file_error_mentions_path_and_cause():
    cause = FileNotFoundError("missing")
    err = CouldntOpenFileError("brushes.abr", cause)
    assert str(err) == "couldn't open file brushes.abr: missing"
    assert err.err is cause


def test_open_abr_error_wraps_cause():
    inner = Found8bimError()
    err = CouldntOpenAbrError(inner)
    assert str(err) == "couldn't open as ABR: found 8bim"
    assert err.err is inner


def test_guess_and_create_dir_errors():
    assert str(CouldntGuessOutputNameError()) == "couldn't guess output name from input"
    cause = FileExistsError("exists")
    err = CouldntCreateOutputDirError("out", cause)
    assert str(err) == "couldn't create output directory out: exists"
    assert err.output_path == "out"


@pytest.mark.parametrize(
    ("err", "message"),
    [
        (Found8bimError(), "found 8bim"),
        (UnsupportedBitDepthError(16), "unsupported bit-depth, 16-bit"),
        (BadBitDepthError(3), "bad bit-depth: 3"),
        (CouldntGuessOutputNameError(), "couldn't guess output name from input"),
        (WrongNumberOfInputFilesError(0), "expected exactly one input file but got 0"),
    ],
)
def test_all_share_base(err, message):
    with pytest.raises(AbrupngError) as excinfo:
        raise err
    assert excinfo.value is err
    assert str(excinfo.value) == message