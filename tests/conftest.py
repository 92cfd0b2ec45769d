from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import numpy as np  # noqa: E402
import pytest  # noqa: E402

from overlay_cam.config import AppConfig  # noqa: E402
from overlay_cam.overlays import OverlayStyle  # noqa: E402

WHITE = [255, 255, 255]


@pytest.fixture
def blank_frame() -> np.ndarray:
    """300x300 black BGR frame."""
    return np.zeros((300, 300, 3), dtype=np.uint8)


@pytest.fixture
def solid_style() -> OverlayStyle:
    """Opaque white 1px lines, so drawn pixels are exactly WHITE."""
    return OverlayStyle(color="#ffffff", opacity=1.0, thickness=1)


@pytest.fixture
def tmp_state_dir(tmp_path: Path) -> Path:
    state = tmp_path / "state"
    state.mkdir()
    return state


@pytest.fixture
def app_config(tmp_state_dir: Path) -> AppConfig:
    return AppConfig(state_dir=str(tmp_state_dir))
