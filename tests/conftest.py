from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

import pytest

from pixelcanvas.core.errors import OutOfBoundsError

PpmImage = tuple[int, int, list[list[tuple[int, int, int]]]]


@pytest.fixture
def fixtures_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    # Keep tests away from the real ~/.pixelcanvas
    home = tmp_path / "home"
    monkeypatch.setenv("PIXELCANVAS_HOME", str(home))
    return home


@pytest.fixture
def read_ppm() -> Callable[[Path], PpmImage]:
    """Parse a P3 file into (width, height, rows of RGB triples)."""

    def _read(path: Path) -> PpmImage:
        lines = path.read_text(encoding="ascii").splitlines()
        assert lines[0] == "P3"
        width, height = (int(v) for v in lines[1].split())
        assert lines[2] == "255"
        rows = []
        for line in lines[3:]:
            vals = [int(v) for v in line.split()]
            assert len(vals) == width * 3
            rows.append([tuple(vals[i : i + 3]) for i in range(0, len(vals), 3)])
        assert len(rows) == height
        return width, height, rows

    return _read


@pytest.fixture
def scripted() -> Callable[[Iterable[str]], Callable[[str], str]]:
    """Build an ``input``-like reader that replays lines then raises EOFError."""

    def _make(lines: Iterable[str]) -> Callable[[str], str]:
        it = iter(lines)

        def _read(prompt: str = "") -> str:
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        return _read

    return _make


class FakeSurface:
    """Records pixel writes; optionally fails every write."""

    def __init__(self, width: int, height: int, *, fail_writes: bool = False) -> None:
        self.size = (width, height)
        self.fail_writes = fail_writes
        self.writes: list[tuple[int, int, str]] = []

    def dimensions(self) -> tuple[int, int]:
        return self.size

    def set_pixel(self, x: int, y: int, color: str) -> None:
        if self.fail_writes:
            raise OutOfBoundsError()
        self.writes.append((x, y, color))

    def get_pixel(self, x: int, y: int) -> str:  # pragma: no cover
        return "white"


@pytest.fixture
def fake_surface() -> Callable[..., FakeSurface]:
    return FakeSurface
