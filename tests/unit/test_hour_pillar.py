#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""时柱计算单元测试"""

from collections import Counter

import pytest

from saju_core.calculators.hour_pillar import corrected_minutes, hour_branch_index, hour_pillar
from saju_core.data.stems_branches import HEAVENLY_STEMS, STEM_BY_KOREAN


class TestTimeCorrection:

    @pytest.mark.parametrize("hour, minute, expected", [
        (0, 0, 1410),   # 负值回绕
        (0, 29, 1439),
        (0, 30, 0),
        (4, 0, 210),
        (23, 59, 1409),
    ])
    def test_corrected_minutes(self, hour, minute, expected):
        assert corrected_minutes(hour, minute) == expected

    def test_custom_correction(self):
        assert corrected_minutes(4, 0, correction_minutes=0) == 240


class TestHourBuckets:

    @pytest.mark.parametrize("hour, minute, expected", [
        (23, 29, 11),
        (23, 30, 0),
        (0, 0, 0),
        (1, 29, 0),
        (1, 30, 1),
        (4, 0, 2),
        (9, 40, 5),
        (12, 0, 6),
        (22, 59, 11),
    ])
    def test_bucket_boundaries(self, hour, minute, expected):
        assert hour_branch_index(hour, minute) == expected

    def test_every_minute_maps_to_exactly_one_bucket(self):
        counts = Counter(
            hour_branch_index(hour, minute)
            for hour in range(24)
            for minute in range(60)
        )
        assert set(counts) == set(range(12))
        assert all(count == 120 for count in counts.values())

    def test_uncorrected_buckets_align_to_odd_hours(self):
        assert hour_branch_index(23, 0, correction_minutes=0) == 0
        assert hour_branch_index(0, 59, correction_minutes=0) == 0
        assert hour_branch_index(1, 0, correction_minutes=0) == 1


class TestHourPillar:

    @pytest.mark.parametrize("day_stem, hour, minute, expected", [
        ("병", 4, 0, "경인"),
        ("신", 9, 40, "계사"),
        ("갑", 0, 0, "갑자"),   # 갑기일 갑자시
        ("경", 0, 0, "병자"),   # 을경일 병자시
        ("무", 23, 45, "임자"),  # 무계일 임자시
        ("정", 12, 0, "병오"),
    ])
    def test_known_hour_pillars(self, day_stem, hour, minute, expected):
        assert hour_pillar(STEM_BY_KOREAN[day_stem], hour, minute).name == expected

    def test_parity_for_all_day_stems_and_minutes(self):
        for stem in HEAVENLY_STEMS:
            for hour in range(24):
                for minute in (0, 29, 30, 59):
                    pillar = hour_pillar(stem, hour, minute)
                    assert pillar.stem.index % 2 == pillar.branch.index % 2
