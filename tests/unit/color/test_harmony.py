"""色相調和スコアのユニットテスト。"""

from itertools import permutations

import pytest

from brandcheck.color.harmony import classify_harmony, harmony_score


class TestClassifyHarmony:
    def test_complementary(self) -> None:
        assert classify_harmony([0, 180]) == "complementary"

    def test_triadic(self) -> None:
        assert classify_harmony([0, 120, 240]) == "triadic"

    def test_analogous(self) -> None:
        assert classify_harmony([0, 20, 40]) == "analogous"

    def test_hue_difference_wraps_around(self) -> None:
        assert classify_harmony([350, 10]) == "analogous"

    def test_none(self) -> None:
        assert classify_harmony([0, 65]) == "none"

    @pytest.mark.parametrize("hues", [[], [10], [0, 90, 180, 270]])
    def test_requires_two_or_three_hues(self, hues: list[float]) -> None:
        with pytest.raises(ValueError):
            classify_harmony(hues)


class TestHarmonyScore:
    def test_scheme_scores(self) -> None:
        assert harmony_score([0, 180]) == 95
        assert harmony_score([0, 120, 240]) == 95
        assert harmony_score([0, 20, 40]) == 85

    def test_fallback_uses_mean_difference(self) -> None:
        assert harmony_score([0, 65]) == pytest.approx(82.5)

    def test_fallback_is_capped_at_100(self) -> None:
        # 差100度: 50 + 100 / 2 = 100
        assert harmony_score([0, 100]) == 100

    def test_order_independent(self) -> None:
        assert harmony_score([40, 0, 20]) == harmony_score([0, 20, 40])
        assert harmony_score([65, 0]) == harmony_score([0, 65])

    def test_order_independent_for_fractional_hues(self) -> None:
        hues = [138.91304347826087, 126.31578947368422, 210.62176165803108]
        expected = harmony_score(hues)
        for ordering in permutations(hues):
            assert harmony_score(list(ordering)) == expected
