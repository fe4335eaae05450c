"""Tests for the command-line front end."""
import numpy as np
from PIL import Image

from pixelpalette.main import main


def _write_png(path, size=(10, 7), color=(250, 5, 5, 255)):
    Image.new("RGBA", size, color).save(path)


def test_cli_writes_png(tmp_path, capsys):
    src = tmp_path / "in.png"
    dst = tmp_path / "out.png"
    _write_png(src)
    assert main(["-i", str(src), "-o", str(dst), "--block", "3", "--colors", "red", "--report"]) == 0
    arr = np.array(Image.open(dst))
    assert arr.shape == (6, 9, 4)
    assert (arr == (255, 0, 0, 255)).all()
    out = capsys.readouterr().out
    assert "block 3" in out
    assert "#ff0000" in out


def test_cli_dither_with_explicit_palette(tmp_path):
    src = tmp_path / "in.png"
    dst = tmp_path / "out.png"
    _write_png(src, color=(128, 128, 128, 255))
    assert main(["-i", str(src), "-o", str(dst), "--dither", "--palette", "#000", "#fff"]) == 0
    arr = np.array(Image.open(dst))
    assert arr.shape == (7, 10, 4)
    assert set(np.unique(arr[:, :, :3])) <= {0, 255}


def test_cli_missing_input(tmp_path, capsys):
    assert main(["-i", str(tmp_path / "nope.png")]) == 2
    assert "Argument error" in capsys.readouterr().out


def test_cli_bad_block(tmp_path):
    src = tmp_path / "in.png"
    _write_png(src)
    assert main(["-i", str(src), "--block", "0"]) == 2


def test_cli_unknown_colour(tmp_path):
    src = tmp_path / "in.png"
    _write_png(src)
    assert main(["-i", str(src), "--colors", "mauve"]) == 2


def test_cli_list_colors(capsys):
    assert main(["--list-colors"]) == 0
    out = capsys.readouterr().out
    assert "Black" in out and "Red" in out
