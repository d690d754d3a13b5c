#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""年柱计算单元测试"""

import pytest

from saju_core.calculators.year_pillar import effective_year, year_pillar


class TestYearPillar:

    @pytest.mark.parametrize("ymd, expected", [
        ((1984, 2, 4), "갑자"),
        ((1971, 11, 17), "신해"),
        ((1976, 9, 16), "병진"),
        ((2024, 6, 1), "갑진"),
        ((2026, 10, 19), "병오"),
        ((4, 6, 1), "갑자"),
        ((-56, 6, 1), "갑자"),
    ])
    def test_known_years(self, ymd, expected):
        assert year_pillar(*ymd).name == expected

    def test_ring_closure_for_many_years(self):
        for year in range(-300, 3000, 7):
            pillar = year_pillar(year, 6, 1)
            assert 0 <= pillar.index <= 59
            assert pillar.stem.index % 2 == pillar.branch.index % 2

    def test_sixty_year_cycle(self):
        assert year_pillar(1924, 6, 1) is year_pillar(1984, 6, 1) is year_pillar(2044, 6, 1)


class TestSolarNewYearCutoff:

    def test_cutoff_day_and_day_before_are_adjacent_years(self):
        before = year_pillar(1984, 2, 3)
        on = year_pillar(1984, 2, 4)
        assert before.name == "계해"
        assert on.name == "갑자"
        assert (before.index + 1) % 60 == on.index

    def test_january_belongs_to_previous_year(self):
        assert year_pillar(1984, 1, 31).name == "계해"
        assert year_pillar(2024, 1, 1) is year_pillar(2023, 12, 31)

    @pytest.mark.parametrize("ymd, expected", [
        ((2024, 1, 15), 2023),
        ((2024, 2, 3), 2023),
        ((2024, 2, 4), 2024),
        ((2024, 3, 1), 2024),
        ((2024, 12, 31), 2024),
    ])
    def test_effective_year(self, ymd, expected):
        assert effective_year(*ymd) == expected

    def test_configurable_cutoff_day(self):
        assert year_pillar(1984, 2, 4, cutoff_day=5).name == "계해"
        assert year_pillar(1984, 2, 5, cutoff_day=5).name == "갑자"
