from __future__ import annotations

import pytest
from pydantic import ValidationError

from rasterdiff.compare import PixelByPixelImageComparator
from rasterdiff.config import THRESHOLD_PRESETS, ComparatorConfig, build_comparator
from rasterdiff.modes import DEFAULT_THRESHOLD, ExactMode, MaskMode


class TestComparatorConfig:
    def test_defaults(self):
        config = ComparatorConfig()
        assert config.mode == "exact"
        assert config.threshold == DEFAULT_THRESHOLD

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValidationError):
            ComparatorConfig(threshold=-5)

    def test_unknown_mode_rejected(self):
        with pytest.raises(ValidationError):
            ComparatorConfig(mode="fuzzy")

    def test_frozen(self):
        config = ComparatorConfig()
        with pytest.raises(ValidationError):
            config.threshold = 10

    def test_build_mode(self):
        assert ComparatorConfig(mode="mask", threshold=64).build_mode() == MaskMode(64)
        assert ComparatorConfig().build_mode() == ExactMode()


class TestPresets:
    def test_known_thresholds(self):
        assert THRESHOLD_PRESETS["strict"] == 64
        assert THRESHOLD_PRESETS["relaxed"] == 512
        assert THRESHOLD_PRESETS["loose"] == 1024
        assert THRESHOLD_PRESETS["text"] == 2300
        assert THRESHOLD_PRESETS["default"] == DEFAULT_THRESHOLD

    def test_from_preset(self):
        config = ComparatorConfig.from_preset("text", mode="mask")
        assert config.mode == "mask"
        assert config.threshold == 2300

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Unknown threshold preset"):
            ComparatorConfig.from_preset("nope")


class TestBuildComparator:
    def test_default(self):
        comparator = build_comparator()
        assert isinstance(comparator, PixelByPixelImageComparator)
        assert comparator.mode == ExactMode()

    def test_from_config(self):
        comparator = build_comparator(ComparatorConfig.from_preset("loose", mode="mask"))
        assert comparator.mode == MaskMode(1024)
