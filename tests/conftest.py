import logging

import pytest

from tux_levels.utils.translations import reset_translations
from tux_levels.utils.vfs import VirtualFileSystem

CURRENT_LEVEL = """
(supertux-level
  (version 2)
  (name (_ "Forest Path"))
  (author "Alice")
  (contact "alice@example.org")
  (license "CC-BY-SA 4.0 International")
  (target-time 90)
  (tileset "images/tiles.strf")
  (sector
    (name "main")
    (music "music/forest/forest.music")
    (gravity 9.5)
    (ambient-light 0.5 0.5 0.5)
    (tilemap (name "interactive") (solid #t) (z-pos 0) (width 3) (height 2)
      (tiles 0 0 0
             1 2 3))
    (spawnpoint (name "main") (x 64) (y 480))
    (coin (x 100) (y 200))
    (coin (x 132) (y 200))
    (snowball (x 300) (y 400) (direction "left"))
  )
  ; trailing metadata keys are ignored at the level layer
  (comment "hello")
  (sector
    (name "secret")
    (secretarea (x 0) (y 0) (width 32) (height 32) (message "Found it"))
  )
)
"""

LEGACY_LEVEL = """
(supertux-level
  (name "Old Times")
  (author "Bob")
  (width 2)
  (height 2)
  (music "fortress.mod")
  (gravity 10)
  (start_pos_x 50)
  (start_pos_y 60)
  (background-tm 0 0 0 0)
  (interactive-tm 1 1 0 0)
  (objects
    (snowball (x 10) (y 20))
    (mriceblock (x 30) (y 40))
  )
)
"""


def make_level(version_line: str = "(version 2)", license_line: str = '(license "GPL-2.0+")', sectors: int = 1) -> str:
    sector_text = "".join(f'(sector (name "s{i}"))' for i in range(sectors))
    return f'(supertux-level {version_line} (name "Test") (author "Tester") {license_line} {sector_text})'


@pytest.fixture(autouse=True)
def _clean_translations():
    reset_translations()
    yield
    reset_translations()


@pytest.fixture
def data_dir(tmp_path):
    levels = tmp_path / "levels"
    levels.mkdir()
    (levels / "forest.stl").write_text(CURRENT_LEVEL, encoding="utf-8")
    (levels / "old.stl").write_text(LEGACY_LEVEL, encoding="utf-8")
    (levels / "broken.stl").write_text("(supertux-level (name \"Broken\"", encoding="utf-8")
    (levels / "notalevel.stl").write_text('(supertux-worldmap (name "Map"))', encoding="utf-8")
    return tmp_path


@pytest.fixture
def vfs(data_dir):
    return VirtualFileSystem([data_dir])


@pytest.fixture
def recording_registrar():
    calls = []

    def register(path):
        calls.append(path)

    register.calls = calls
    return register


def warnings_in(caplog):
    return [record for record in caplog.records if record.levelno == logging.WARNING]
