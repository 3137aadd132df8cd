from pathlib import Path

import pytest


DEFAULT_INI = """\
[Translation]
Enabled=1
Factor=1.0

[Rotation]
Enabled=1
"""

APP_A_INI = """\
; per-app override
[Translation]
Enabled=0
"""


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    (tmp_path / "OpenXR-MotionCompensation.ini").write_text(DEFAULT_INI, encoding="utf-8")
    (tmp_path / "AppA.ini").write_text(APP_A_INI, encoding="utf-8")
    return tmp_path


class RecordingWriter:
    """Stands in for the key-write primitive; fails for the keys it is told to."""

    def __init__(self, fail_keys=()):
        self.fail_keys = set(fail_keys)
        self.calls = []

    def __call__(self, section, key, value, filename):
        self.calls.append((section, key, value, filename))
        return 0 if key in self.fail_keys else 1


@pytest.fixture
def writer() -> RecordingWriter:
    return RecordingWriter()
