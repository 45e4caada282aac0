"""Game configuration: board geometry, timing, colours and key bindings."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720
DEFAULT_CELL_SIZE = 20
DEFAULT_PADDING = 1
DEFAULT_TICK_MS = 100
DEFAULT_REFRESH_MS = 16

Color = tuple[int, int, int]


@dataclass(frozen=True)
class Palette:
    """Fill colours for the three kinds of rectangle on screen."""

    background: Color = (64, 64, 64)
    snake: Color = (0, 255, 0)
    food: Color = (255, 0, 0)


@dataclass(frozen=True)
class KeyBindings:
    """Key identifiers mapped to each heading and to quitting.

    Identifiers are lower-case key names such as ``"w"`` or ``"up"``.
    """

    up: tuple[str, ...] = ("w", "up")
    down: tuple[str, ...] = ("s", "down")
    left: tuple[str, ...] = ("a", "left")
    right: tuple[str, ...] = ("d", "right")
    quit: tuple[str, ...] = ("escape",)


@dataclass(frozen=True)
class GameConfig:
    """Full game configuration.

    Supports JSON serialization so a setup can be reused between runs.
    """

    # Surface
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    cell_size: int = DEFAULT_CELL_SIZE
    padding: int = DEFAULT_PADDING

    # Timing
    tick_ms: int = DEFAULT_TICK_MS
    refresh_ms: int = DEFAULT_REFRESH_MS

    # Food placement
    max_food_attempts: int = 64
    seed: int | None = None

    palette: Palette = field(default_factory=Palette)
    keys: KeyBindings = field(default_factory=KeyBindings)

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("width and height must be positive.")
        if self.cell_size < 1:
            raise ValueError("cell_size must be positive.")
        if self.columns < 1 or self.rows < 1:
            raise ValueError("Surface must fit at least one cell.")
        if not 0 <= self.padding < self.cell_size:
            raise ValueError("padding must be in [0, cell_size).")
        if self.tick_ms < 1 or self.refresh_ms < 1:
            raise ValueError("tick_ms and refresh_ms must be positive.")
        if self.max_food_attempts < 0:
            raise ValueError("max_food_attempts must be >= 0.")

    @property
    def columns(self) -> int:
        return self.width // self.cell_size

    @property
    def rows(self) -> int:
        return self.height // self.cell_size

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists)."""
        return asdict(self)

    def replace(self, **overrides) -> GameConfig:
        """Return a copy with top-level fields overridden."""
        d = self.to_dict()
        d.update(overrides)
        return GameConfig.from_dict(d)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        """Build a config from a plain dict, rejecting unknown keys."""
        _check_keys(cls, raw)
        raw = dict(raw)
        palette = raw.pop("palette", None) or {}
        keys = raw.pop("keys", None) or {}
        if isinstance(palette, dict):
            _check_keys(Palette, palette)
            palette = Palette(**{k: tuple(v) for k, v in palette.items()})
        if isinstance(keys, dict):
            _check_keys(KeyBindings, keys)
            keys = KeyBindings(
                **{k: tuple(str(c).lower() for c in v) for k, v in keys.items()},
            )
        return cls(palette=palette, keys=keys, **raw)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        return cls.from_dict(json.loads(Path(path).read_text()))


def _check_keys(kind: type, raw: dict) -> None:
    unknown = sorted(set(raw) - {f.name for f in fields(kind)})
    if unknown:
        raise ValueError(f"Unknown {kind.__name__} keys: {', '.join(unknown)}")
