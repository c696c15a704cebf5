"""Tests for the user profile."""

import pytest

from user import User


class TestUser:

    def test_default_stride(self):
        assert User().stride == 70

    def test_explicit_stride(self):
        assert User(None, None, 100).stride == 100.0

    def test_stride_wins_over_height(self):
        assert User("female", 167, 65).stride == 65.0

    def test_stride_from_height(self):
        assert User("female", 167).stride == pytest.approx(68.97)
        assert User("male", 180).stride == pytest.approx(74.7)
        assert User(height=100).stride == pytest.approx(41.4)

    def test_gender_is_case_insensitive(self):
        assert User("Female").gender == "female"

    @pytest.mark.parametrize("kwargs", [
        {"gender": "robot"},
        {"height": 0},
        {"height": "tall"},
        {"stride": -1},
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(ValueError):
            User(**kwargs)
