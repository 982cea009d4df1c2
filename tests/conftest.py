import json
from pathlib import Path
from typing import Any, Callable

import pytest

WriteLocale = Callable[[str, Any], Path]


@pytest.fixture
def locale_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "locales"
    directory.mkdir()
    return directory


@pytest.fixture
def write_locale(locale_dir: Path) -> WriteLocale:
    def write(name: str, payload: Any) -> Path:
        path = locale_dir / name
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        return path

    return write
