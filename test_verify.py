import pytest

from sixfa import (
    SeedSet,
    generate_combined_token,
    step_offsets,
    verify_combined_token,
)
from sixfa.totp.generator import MAX_TIME

SEEDS = ["a", "b", "c", "d", "e", "f"]
T0 = 1700000000
WINDOW = 30
GOLDEN = "671251-223724-690512-154754-590474-457655"


class TestStepOffsets:
    @pytest.mark.parametrize("allowed", [-3, 0, 1])
    def test_current_window_only(self, allowed):
        assert list(step_offsets(allowed)) == [0]

    def test_symmetric_order(self):
        assert list(step_offsets(2)) == [0, 1, -1]
        assert list(step_offsets(4)) == [0, 1, -1, 2, -2, 3, -3]

    def test_candidate_count(self):
        for n in range(1, 10):
            assert len(list(step_offsets(n))) == 2 * n - 1

    def test_offsets_are_lazy(self):
        offsets = step_offsets(2 ** 32 - 1)
        assert next(offsets) == 0
        assert next(offsets) == 1
        assert next(offsets) == -1

    @pytest.mark.parametrize("allowed", [2.0, "2", None, True, 2 ** 32])
    def test_invalid_allowed_windows(self, allowed):
        with pytest.raises(ValueError):
            list(step_offsets(allowed))


class TestGoldenScenario:
    def test_same_time(self):
        assert verify_combined_token(SEEDS, T0, GOLDEN, WINDOW, 1, "s")

    def test_next_window_without_drift(self):
        assert not verify_combined_token(SEEDS, T0 + 31, GOLDEN, WINDOW, 1, "s")

    def test_next_window_with_drift(self):
        assert verify_combined_token(SEEDS, T0 + 31, GOLDEN, WINDOW, 2, "s")

    def test_zero_allowed_windows_behaves_like_one(self):
        assert verify_combined_token(SEEDS, T0, GOLDEN, WINDOW, 0, "s")
        assert not verify_combined_token(SEEDS, T0 + 31, GOLDEN, WINDOW, 0, "s")


@pytest.mark.parametrize("allowed", [1, 2, 3, 5])
def test_round_trip(allowed):
    for time in (0, 29, T0, 2 ** 40 + 7):
        token = generate_combined_token(SEEDS, time, WINDOW)
        assert verify_combined_token(SEEDS, time, token, WINDOW, allowed, "s")


@pytest.mark.parametrize("allowed", [1, 2, 3])
def test_drift_tolerance(allowed):
    for k in range(-allowed - 1, allowed + 2):
        token = generate_combined_token(SEEDS, T0 + k * WINDOW, WINDOW)
        result = verify_combined_token(SEEDS, T0, token, WINDOW, allowed, "s")
        assert result is (abs(k) <= allowed - 1), f"k={k}"


def test_unit_has_no_effect():
    token = generate_combined_token(SEEDS, T0 + WINDOW, WINDOW)
    for unit in ("s", "m", "h", "", "anything"):
        assert verify_combined_token(SEEDS, T0, token, WINDOW, 2, unit)
        assert not verify_combined_token(SEEDS, T0, token, WINDOW, 1, unit)


def test_defaults():
    assert verify_combined_token(SEEDS, T0, GOLDEN, WINDOW)


def test_accepts_seed_set():
    assert verify_combined_token(SeedSet(SEEDS), T0, GOLDEN, WINDOW, 1, "s")


def test_wrong_seed_order_fails():
    reordered = SEEDS[::-1]
    assert not verify_combined_token(reordered, T0, GOLDEN, WINDOW, 3, "s")


@pytest.mark.parametrize("token", [
    "",
    GOLDEN.replace("-", ""),
    GOLDEN.replace("-", " "),
    GOLDEN + "-",
    " " + GOLDEN,
    "671251-223724-690512-154754-590474",
    "671251-223724-690512-154754-590474-457656",
    "６７１２５１-223724-690512-154754-590474-457655",
])
def test_near_miss_tokens_rejected(token):
    assert verify_combined_token(SEEDS, T0, token, WINDOW, 2, "s") is False


@pytest.mark.parametrize("token", [None, 671251, b"671251-223724-690512-154754-590474-457655"])
def test_non_string_token_is_a_mismatch(token):
    assert verify_combined_token(SEEDS, T0, token, WINDOW, 1, "s") is False


def test_invalid_window_raises():
    with pytest.raises(ValueError):
        verify_combined_token(SEEDS, T0, GOLDEN, 0, 1, "s")


def test_wrong_seed_count_raises():
    with pytest.raises(ValueError):
        verify_combined_token(SEEDS[:5], T0, GOLDEN, WINDOW, 1, "s")


def test_steps_before_epoch_are_skipped():
    token = generate_combined_token(SEEDS, 0, WINDOW)
    assert verify_combined_token(SEEDS, 0, token, WINDOW, 3, "s")
    assert not verify_combined_token(SEEDS, 0, GOLDEN, WINDOW, 3, "s")


def test_steps_past_max_time_are_skipped():
    token = generate_combined_token(SEEDS, MAX_TIME - WINDOW, WINDOW)
    assert verify_combined_token(SEEDS, MAX_TIME, token, WINDOW, 2, "s")
    # No wraparound: the step past the top never lands near zero
    early = generate_combined_token(SEEDS, 0, WINDOW)
    assert not verify_combined_token(SEEDS, MAX_TIME, early, WINDOW, 2, "s")


def test_current_window_match_ignores_huge_drift_range():
    # Offset 0 matches first, so the rest of the range is never generated
    assert verify_combined_token(SEEDS, T0, GOLDEN, WINDOW, 2 ** 32 - 1, "s")


@pytest.mark.parametrize("allowed", [2.0, "2", None, 2 ** 32])
def test_invalid_allowed_windows_raises(allowed):
    with pytest.raises(ValueError, match="Allowed windows"):
        verify_combined_token(SEEDS, T0, GOLDEN, WINDOW, allowed, "s")
