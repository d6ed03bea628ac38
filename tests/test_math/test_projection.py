"""Tests for target VDOT projection."""

import pytest

from fitness_engine.math.projection import suggest_target
from fitness_engine.models.enums import VDOT_MAX, ExperienceTier


class TestSuggestTarget:
    def test_beginner_twelve_weeks(self) -> None:
        # 50 + 0.8 * 12 = 59.6
        assert suggest_target(50, ExperienceTier.BEGINNER, 12) == 60

    def test_intermediate_and_advanced(self) -> None:
        assert suggest_target(50, ExperienceTier.INTERMEDIATE, 12) == 56
        assert suggest_target(50, ExperienceTier.ADVANCED, 12) == 54

    def test_default_is_twelve_weeks(self) -> None:
        assert suggest_target(50, ExperienceTier.BEGINNER) == 60

    def test_beginners_improve_most(self) -> None:
        beginner = suggest_target(45, ExperienceTier.BEGINNER)
        intermediate = suggest_target(45, ExperienceTier.INTERMEDIATE)
        advanced = suggest_target(45, ExperienceTier.ADVANCED)
        assert beginner >= intermediate >= advanced > 45

    def test_longer_block_higher_target(self) -> None:
        short = suggest_target(45, ExperienceTier.INTERMEDIATE, 8)
        long = suggest_target(45, ExperienceTier.INTERMEDIATE, 20)
        assert (short, long) == (49, 55)

    def test_capped_at_vdot_max(self) -> None:
        """Targets never exceed VDOT_MAX however long the block."""
        assert suggest_target(80, ExperienceTier.BEGINNER, 12) == VDOT_MAX
        assert suggest_target(85, ExperienceTier.ADVANCED, 52) == VDOT_MAX

    def test_never_below_current(self) -> None:
        """Every tier and block length gives a target at or above current VDOT."""
        for vdot in range(20, 86):
            for tier in ExperienceTier:
                for weeks in (0, 1, 12, 40):
                    assert suggest_target(vdot, tier, weeks) >= vdot

    def test_zero_weeks_is_current(self) -> None:
        assert suggest_target(42, ExperienceTier.ADVANCED, 0) == 42

    def test_current_above_domain_is_clamped(self) -> None:
        assert suggest_target(95, ExperienceTier.BEGINNER, 4) == VDOT_MAX

    def test_negative_weeks_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            suggest_target(50, ExperienceTier.BEGINNER, -1)
