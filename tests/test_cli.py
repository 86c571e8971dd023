import pytest
from PIL import Image

from pdfstreams.cli import main

from predictors import flate, png_encode


def test_decodes_flate_to_output_file(tmp_path):
    src = tmp_path / "content.bin"
    out = tmp_path / "content.txt"
    src.write_bytes(flate(b"BT (Hi) Tj ET"))

    assert main([str(src), "-o", str(out)]) == 0
    assert out.read_bytes() == b"BT (Hi) Tj ET"


def test_writes_to_stdout(tmp_path, capsysbinary):
    src = tmp_path / "data.hex"
    src.write_bytes(b"48 69>")

    assert main(["-f", "ASCIIHexDecode", str(src)]) == 0
    assert capsysbinary.readouterr().out == b"Hi"


def test_predictor_options(tmp_path):
    original = bytes([1, 2, 3, 4, 5, 6])
    src = tmp_path / "xref.bin"
    out = tmp_path / "xref.raw"
    src.write_bytes(flate(png_encode(original, 3, [1, 2])))

    assert main(["--predictor", "12", "--columns", "3", str(src), "-o", str(out)]) == 0
    assert out.read_bytes() == original


def test_decode_error_exit_status(tmp_path, capsys):
    src = tmp_path / "bad.bin"
    src.write_bytes(flate(bytes(5)))

    assert main(["--predictor", "2", "--columns", "4", str(src), "-o", str(tmp_path / "out")]) == 1
    assert "/invalidrowlength" in capsys.readouterr().err


def test_unsupported_filter_exit_status(tmp_path, capsys):
    src = tmp_path / "data.bin"
    src.write_bytes(b"")

    assert main(["-f", "JBIG2Decode", str(src)]) == 1
    assert "/unsupportedfilter" in capsys.readouterr().err


def test_missing_input_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.bin")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_image_export(tmp_path):
    original = bytes([0, 50, 100, 150, 200, 250])
    src = tmp_path / "image.bin"
    png = tmp_path / "image.png"
    out = tmp_path / "image.raw"
    src.write_bytes(flate(png_encode(original, 3, [0, 2])))

    assert main(["--predictor", "15", "--columns", "3", str(src),
                 "-o", str(out), "--image", str(png)]) == 0
    with Image.open(png) as img:
        assert img.size == (3, 2)
        assert img.getpixel((0, 1)) == 150


def test_image_export_requires_columns(tmp_path):
    src = tmp_path / "image.bin"
    src.write_bytes(flate(b"abc"))
    with pytest.raises(SystemExit) as excinfo:
        main([str(src), "--image", str(tmp_path / "x.png")])
    assert excinfo.value.code == 2


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert "PdfStreams" in capsys.readouterr().out
