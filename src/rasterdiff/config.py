from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from rasterdiff.compare import PixelByPixelImageComparator
from rasterdiff.modes import DEFAULT_THRESHOLD, ExactMode, MaskMode, PixelComparisonMode

# Thresholds the drawing tests pick from, by how much antialiasing noise the
# rendered content is expected to produce.
THRESHOLD_PRESETS: dict[str, int] = {
    "default": DEFAULT_THRESHOLD,
    "strict": 64,
    "relaxed": 512,
    "loose": 1024,
    "text": 2300,
}

_MODES: dict[str, type[PixelComparisonMode]] = {
    ExactMode.name: ExactMode,
    MaskMode.name: MaskMode,
}


class ComparatorConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: Literal["exact", "mask"] = "exact"
    threshold: int = Field(default=DEFAULT_THRESHOLD, ge=0)

    @classmethod
    def from_preset(cls, preset: str, mode: Literal["exact", "mask"] = "exact") -> ComparatorConfig:
        try:
            threshold = THRESHOLD_PRESETS[preset]
        except KeyError:
            raise ValueError(f"Unknown threshold preset: {preset!r}") from None
        return cls(mode=mode, threshold=threshold)

    def build_mode(self) -> PixelComparisonMode:
        return _MODES[self.mode](threshold=self.threshold)


def build_comparator(config: ComparatorConfig | None = None) -> PixelByPixelImageComparator:
    config = config or ComparatorConfig()
    return PixelByPixelImageComparator(config.build_mode())
