"""Tests for BMR and daily calorie calculation."""

from __future__ import annotations

from decimal import Decimal

import pytest

from dailycal.profiles import (
    UNKNOWN_ACTIVITY_LEVEL,
    ActivityLevel,
    BiometricInput,
    CalculationResult,
    Sex,
    UnrecognizedActivityLevelError,
    UnrecognizedSexError,
    calculate,
    compute_bmr,
    compute_daily_calories,
    daily_calories_text,
    describe_activity,
    round_half_up,
)


class TestComputeBMR:
    """Tests for the Mifflin-St Jeor BMR."""

    def test_male(self) -> None:
        """700 + 1093.75 - 125 + 5 = 1673.75 rounds to 1674."""
        assert compute_bmr(Sex.MALE, 70, 175, 25) == 1674

    def test_female(self) -> None:
        """600 + 1031.25 - 150 - 161 = 1320.25 rounds to 1320."""
        assert compute_bmr(Sex.FEMALE, 60, 165, 30) == 1320

    def test_accepts_string_values(self) -> None:
        assert compute_bmr("male", 70, 175, 25) == 1674
        assert compute_bmr("female", 60, 165, 30) == 1320

    def test_sex_offset_difference(self) -> None:
        """Male and female differ by exactly 166 for the same metrics."""
        male = compute_bmr(Sex.MALE, 80, 180, 40)
        female = compute_bmr(Sex.FEMALE, 80, 180, 40)
        assert male - female == 166

    def test_exact_half_rounds_up(self) -> None:
        """700 + 1087.5 - 120 + 5 = 1672.5 rounds up to 1673."""
        assert compute_bmr(Sex.MALE, 70, 174, 24) == 1673

    @pytest.mark.parametrize("sex", ["other", "Male", "m", "", None, 1])
    def test_unknown_sex_fails_fast(self, sex) -> None:
        """Anything outside the Sex enumeration is never treated as female."""
        with pytest.raises(UnrecognizedSexError):
            compute_bmr(sex, 60, 165, 30)

    def test_unknown_sex_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            compute_bmr("other", 60, 165, 30)


class TestComputeDailyCalories:
    """Tests for activity-adjusted daily calories."""

    def test_moderately_active(self) -> None:
        """1674 x 1.55 = 2594.7 rounds to 2595."""
        assert compute_daily_calories(1674, 1.55) == 2595

    def test_accepts_activity_level(self) -> None:
        """1674 x 1.725 = 2887.65 rounds to 2888."""
        assert compute_daily_calories(1674, ActivityLevel.VERY_ACTIVE) == 2888

    def test_sedentary(self) -> None:
        assert compute_daily_calories(1320, ActivityLevel.SEDENTARY) == 1584

    @pytest.mark.parametrize("multiplier", [1.0, 0, -1.2, 2.0, 1.5, 10**400])
    def test_unrecognized_multiplier_raises(self, multiplier) -> None:
        """No default of 1.0 for multipliers outside the table."""
        with pytest.raises(UnrecognizedActivityLevelError) as exc_info:
            compute_daily_calories(1674, multiplier)
        assert exc_info.value.multiplier == multiplier

    @pytest.mark.parametrize("multiplier", ["1.55", None, True])
    def test_non_numeric_multiplier_raises(self, multiplier) -> None:
        with pytest.raises(UnrecognizedActivityLevelError):
            compute_daily_calories(1674, multiplier)


class TestDescribeActivity:
    """Tests for the lenient activity description lookup."""

    @pytest.mark.parametrize(
        "multiplier,expected",
        [
            (1.2, "Sedentary lifestyle"),
            (1.375, "Lightly active"),
            (1.55, "Moderately active"),
            (1.725, "Very active"),
            (1.9, "Super active"),
        ],
    )
    def test_known_multipliers(self, multiplier, expected) -> None:
        assert describe_activity(multiplier) == expected

    def test_accepts_enum_and_string(self) -> None:
        assert describe_activity(ActivityLevel.SUPER_ACTIVE) == "Super active"
        assert describe_activity("1.55") == "Moderately active"

    @pytest.mark.parametrize(
        "multiplier",
        [0, -1.2, 2.0, 1.0, "abc", None, True, 10**400, -10**400, "1e400", Decimal("sNaN")],
    )
    def test_unknown_returns_sentinel(self, multiplier) -> None:
        assert describe_activity(multiplier) == UNKNOWN_ACTIVITY_LEVEL

    def test_only_table_entries_are_known(self) -> None:
        """Exactly the five multipliers have a real description."""
        candidates = [x / 1000 for x in range(0, 2501, 25)]
        known = [m for m in candidates if describe_activity(m) != UNKNOWN_ACTIVITY_LEVEL]
        assert sorted(known) == [1.2, 1.375, 1.55, 1.725, 1.9]


class TestCalculate:
    """Tests for the full calculation."""

    def test_male_result(self, male_input, moderate) -> None:
        result = calculate(male_input, moderate)

        assert result == CalculationResult(
            bmr=1674,
            daily_calories=2595,
            activity_multiplier=1.55,
            activity_description="Moderately active",
            formula_text="BMR = (10 × weight) + (6.25 × height) - (5 × age) + 5",
        )

    def test_female_formula_text(self, female_input) -> None:
        result = calculate(female_input, ActivityLevel.SEDENTARY)

        assert result.bmr == 1320
        assert result.daily_calories == 1584
        assert result.formula_text.endswith("- 161")

    def test_deterministic(self, male_input, moderate) -> None:
        """Repeated calls give identical results with no hidden state."""
        first = calculate(male_input, moderate)
        second = calculate(male_input, moderate)

        assert first == second
        assert first.to_dict() == second.to_dict()

    def test_result_is_immutable(self, male_input, moderate) -> None:
        result = calculate(male_input, moderate)
        with pytest.raises(AttributeError):
            result.bmr = 0

    def test_to_dict_keys(self, male_input, moderate) -> None:
        data = calculate(male_input, moderate).to_dict()
        assert data == {
            "bmr": 1674,
            "dailyCalories": 2595,
            "activityMultiplier": 1.55,
            "activityDescription": "Moderately active",
            "formulaText": "BMR = (10 × weight) + (6.25 × height) - (5 × age) + 5",
        }

    def test_daily_calories_text(self, male_input, moderate) -> None:
        result = calculate(male_input, moderate)
        assert daily_calories_text(result) == "Daily Calories = BMR × Activity Factor (1.55)"

    def test_accepts_equal_multiplier(self, male_input, moderate) -> None:
        """A plain multiplier gives the same result as its ActivityLevel."""
        assert calculate(male_input, 1.55) == calculate(male_input, moderate)

    @pytest.mark.parametrize("activity", [2.0, "1.55", None])
    def test_unrecognized_activity_raises(self, male_input, activity) -> None:
        with pytest.raises(UnrecognizedActivityLevelError):
            calculate(male_input, activity)


class TestBiometricInput:
    """Tests for BiometricInput invariants."""

    @pytest.mark.parametrize(
        "age,weight,height",
        [(15, 70, 175), (101, 70, 175), (25, 29.9, 175), (25, 70, 251)],
    )
    def test_out_of_range_rejected(self, age, weight, height) -> None:
        with pytest.raises(ValueError):
            BiometricInput(sex=Sex.MALE, age_years=age, weight_kg=weight, height_cm=height)

    def test_sex_must_be_enum(self) -> None:
        with pytest.raises(ValueError):
            BiometricInput(sex="male", age_years=25, weight_kg=70, height_cm=175)


class TestRoundHalfUp:
    """Tests for the rounding convention."""

    @pytest.mark.parametrize(
        "value,expected",
        [(2594.5, 2595), (2.5, 3), (1320.25, 1320), (1673.75, 1674), (2594.7000000000003, 2595)],
    )
    def test_rounding(self, value, expected) -> None:
        assert round_half_up(value) == expected
