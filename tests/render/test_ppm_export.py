from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from pixelcanvas.core.errors import ExportError
from pixelcanvas.render.canvas import Canvas
from pixelcanvas.render.ppm import encode_ppm, ppm_path, write_ppm
from pixelcanvas.render.shapes import Rectangle


def test_encode_small_canvas_exact_text() -> None:
    c = Canvas(2, 3)
    c.set_pixel(1, 0, "red")
    c.set_pixel(0, 2, "orange")
    assert encode_ppm(c) == (
        "P3\n"
        "2 3\n"
        "255\n"
        "255 255 255 255 0 0\n"
        "255 255 255 255 255 255\n"
        "255 164 0 255 255 255\n"
    )


def test_rectangle_scenario_exported(tmp_path: Path, read_ppm) -> None:
    c = Canvas(10, 10)
    Rectangle(ll=(2, 2), ur=(5, 5), color="red").draw(c)
    path = c.export("scenario", tmp_path)
    assert path == tmp_path / "scenario.ppm"
    width, height, rows = read_ppm(path)
    assert (width, height) == (10, 10)
    assert rows[2][2:5] == [(255, 0, 0)] * 3
    assert rows[2][1] == (255, 255, 255)
    assert rows[1][2] == (255, 255, 255)
    red = sum(1 for row in rows for px in row if px == (255, 0, 0))
    assert red == 9


def test_clear_then_export_is_all_white(tmp_path: Path, read_ppm) -> None:
    c = Canvas(7, 4)
    Rectangle(ll=(0, 0), ur=(6, 3), color="black").draw(c)
    c.clear()
    width, height, rows = read_ppm(c.export("blank", tmp_path))
    assert (width, height) == (7, 4)
    assert all(px == (255, 255, 255) for row in rows for px in row)


def test_rows_are_y_columns_are_x(tmp_path: Path) -> None:
    c = Canvas(5, 3)
    c.set_pixel(4, 0, "blue")
    c.set_pixel(0, 2, "green")
    with Image.open(c.export("orient", tmp_path)) as im:
        assert im.size == (5, 3)
        rgb = im.convert("RGB")
        assert rgb.getpixel((4, 0)) == (0, 0, 255)
        assert rgb.getpixel((0, 2)) == (0, 255, 0)
        assert rgb.getpixel((2, 1)) == (255, 255, 255)


def test_no_trailing_space_on_rows(tmp_path: Path) -> None:
    text = write_ppm(Canvas(3, 2), "trail", tmp_path).read_text()
    for line in text.splitlines():
        assert line == line.rstrip()


def test_export_is_pure_read(tmp_path: Path) -> None:
    c = Canvas(3, 3)
    c.set_pixel(1, 1, "purple")
    c.export("a", tmp_path)
    assert c.get_pixel(1, 1) == "purple"
    assert (tmp_path / "a.ppm").read_text() == encode_ppm(c)


def test_export_to_missing_directory_fails(tmp_path: Path) -> None:
    missing = tmp_path / "nope"
    with pytest.raises(ExportError) as ei:
        Canvas(2, 2).export("img", missing)
    assert isinstance(ei.value.__cause__, OSError)
    assert not missing.exists()


def test_export_empty_name_fails(tmp_path: Path) -> None:
    with pytest.raises(ExportError):
        Canvas(2, 2).export("", tmp_path)


def test_export_overwrites_and_leaves_no_temp(tmp_path: Path) -> None:
    c = Canvas(2, 2)
    c.export("img", tmp_path)
    c.set_pixel(0, 0, "black")
    c.export("img", tmp_path)
    assert sorted(p.name for p in tmp_path.iterdir()) == ["img.ppm"]
    assert "0 0 0" in (tmp_path / "img.ppm").read_text()


def test_ppm_path_appends_extension(tmp_path: Path) -> None:
    assert ppm_path("out") == Path("out.ppm")
    assert ppm_path("out", tmp_path) == tmp_path / "out.ppm"
