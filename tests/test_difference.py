"""Tests for colordle.core.difference: CIEDE2000 and CIE76."""

import math

import pytest

from colordle.core.conversions import rgb_to_lab
from colordle.core.difference import DISTANCE_METRICS, delta_e_cie76, delta_e_ciede2000, get_metric


# Reference pairs from Sharma, Wu & Dalal (2005), Table 1
SHARMA_PAIRS = [
    ((50.0000, 2.6772, -79.7751), (50.0000, 0.0000, -82.7485), 2.0425),
    ((50.0000, 3.1571, -77.2803), (50.0000, 0.0000, -82.7485), 2.8615),
    ((50.0000, 0.0000, 0.0000), (50.0000, -1.0000, 2.0000), 2.3669),
    ((50.0000, 2.4900, -0.0010), (50.0000, -2.4900, 0.0009), 7.1792),
    ((50.0000, 2.5000, 0.0000), (73.0000, 25.0000, -18.0000), 27.1492),
    ((50.0000, 2.5000, 0.0000), (50.0000, 3.2592, 0.3350), 1.0000),
    ((60.2574, -34.0099, 36.2677), (60.4626, -34.1751, 39.4387), 1.2644),
    ((22.7233, 20.0904, -46.6940), (23.0331, 14.9730, -42.5619), 2.0373),
    ((90.9257, -0.5406, -0.9208), (88.6381, -0.8985, -0.7239), 1.5381),
]


class TestCiede2000:
    @pytest.mark.parametrize('lab1,lab2,expected', SHARMA_PAIRS)
    def test_reference_values(self, lab1, lab2, expected):
        assert delta_e_ciede2000(lab1, lab2) == pytest.approx(expected, abs=1e-4)

    @pytest.mark.parametrize('lab1,lab2,expected', SHARMA_PAIRS)
    def test_symmetric(self, lab1, lab2, expected):
        assert delta_e_ciede2000(lab1, lab2) == pytest.approx(delta_e_ciede2000(lab2, lab1), abs=1e-12)

    @pytest.mark.parametrize('rgb', [(0, 0, 0), (255, 255, 255), (0, 0, 255), (52, 84, 109), (128, 128, 128)])
    def test_zero_for_identical_colors(self, rgb):
        lab = rgb_to_lab(*rgb)
        assert delta_e_ciede2000(lab, lab) == 0.0

    def test_black_white_is_large(self):
        d = delta_e_ciede2000(rgb_to_lab(0, 0, 0), rgb_to_lab(255, 255, 255))
        assert d == pytest.approx(100.0, abs=0.1)

    def test_non_negative(self):
        d = delta_e_ciede2000(rgb_to_lab(0, 255, 255), rgb_to_lab(255, 0, 255))
        assert d > 0.0 and math.isfinite(d)


class TestCie76:
    def test_euclidean(self):
        assert delta_e_cie76((50.0, 0.0, 0.0), (53.0, 4.0, 0.0)) == pytest.approx(5.0)

    def test_zero_and_symmetric(self):
        a, b = rgb_to_lab(255, 0, 0), rgb_to_lab(0, 0, 255)
        assert delta_e_cie76(a, a) == 0.0
        assert delta_e_cie76(a, b) == delta_e_cie76(b, a)

    def test_differs_from_ciede2000(self):
        a, b = rgb_to_lab(255, 0, 0), rgb_to_lab(0, 0, 255)
        assert delta_e_cie76(a, b) > delta_e_ciede2000(a, b)


class TestMetricRegistry:
    def test_registry(self):
        assert DISTANCE_METRICS['ciede2000'] is delta_e_ciede2000
        assert DISTANCE_METRICS['cie76'] is delta_e_cie76

    def test_unknown_metric(self):
        with pytest.raises(ValueError):
            get_metric('cie94')
