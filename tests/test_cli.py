import pytest
from PIL import Image

from asciiramp.cli import main


@pytest.fixture
def black_png(tmp_path):
    path = tmp_path / "black.png"
    Image.new("RGB", (8, 4), (0, 0, 0)).save(path)
    return path


def test_prints_grid(black_png, capsys):
    main([str(black_png), "-s", "4"])
    assert capsys.readouterr().out == "$$$$\n$$$$\n"


def test_short_ramp(black_png, capsys):
    main([str(black_png), "-s", "2", "-r", "short"])
    assert capsys.readouterr().out == "@@\n"


def test_writes_png(black_png, tmp_path, capsys):
    out = tmp_path / "ascii_art.png"
    main([str(black_png), "-s", "4", "-o", str(out)])
    assert out.read_bytes().startswith(b"\x89PNG")
    assert capsys.readouterr().out == "$$$$\n$$$$\n"


def test_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "nope.png")])
    assert excinfo.value.code == 1
    assert "File not found" in capsys.readouterr().err


def test_invalid_image(tmp_path, capsys):
    path = tmp_path / "broken.png"
    path.write_bytes(b"garbage")
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == 1
    assert "Could not load valid image data." in capsys.readouterr().err


def test_zero_font_size(black_png, tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(black_png), "-s", "4", "-o", str(tmp_path / "out.png"), "--font-size", "0"])
    assert excinfo.value.code == 1
    assert "Font size must be positive" in capsys.readouterr().err


def test_unwritable_output(black_png, tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(black_png), "-s", "4", "-o", str(tmp_path / "missing" / "out.png")])
    assert excinfo.value.code == 1
    assert "out.png" in capsys.readouterr().err


def test_directory_as_input(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path)])
    assert excinfo.value.code == 1
    assert capsys.readouterr().err
