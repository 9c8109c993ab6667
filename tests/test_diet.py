"""Tests for BMI classification and diet suggestions."""

import pytest

from diet import DIET_PLANS, DIET_TYPES, GENDERS, calculate_bmi, classify_bmi, suggest_diet


class TestClassifyBmi:
    @pytest.mark.parametrize(
        "bmi,expected",
        [
            (15.0, "Not Healthy"),
            (18.49, "Not Healthy"),
            (18.5, "Healthy"),
            (24.99, "Healthy"),
            (25, "Not Healthy"),
            (29.99, "Not Healthy"),
            (30, "Obese"),
            (41.2, "Obese"),
        ],
    )
    def test_boundaries(self, bmi, expected):
        assert classify_bmi(bmi) == expected


class TestCalculateBmi:
    def test_metric_formula(self):
        assert calculate_bmi(70, 170) == pytest.approx(24.22, abs=0.01)

    def test_rejects_zero_height(self):
        with pytest.raises(ValueError):
            calculate_bmi(70, 0)


class TestSuggestDiet:
    def test_every_plan_covers_a_week(self):
        for gender in GENDERS:
            for status, plans in DIET_PLANS[gender].items():
                for diet_type in DIET_TYPES:
                    assert len(suggest_diet(gender, status, diet_type)) == 7

    def test_obese_non_veg_differs_by_gender(self):
        male = suggest_diet("Male", "Obese", "Non-Veg")
        female = suggest_diet("Female", "Obese", "Non-Veg")
        assert male[3] == "Smoothie, lean beef, greens"
        assert female[3] == "Smoothie, beans, greens"

    def test_returns_a_copy(self):
        plan = suggest_diet("Male", "Healthy", "Vegan")
        plan.clear()
        assert len(suggest_diet("Male", "Healthy", "Vegan")) == 7

    def test_unknown_diet_type(self):
        with pytest.raises(KeyError):
            suggest_diet("Male", "Healthy", "Carnivore")


class TestBmiEndpoint:
    def test_healthy_profile(self, client):
        response = client.post(
            "/api/bmi", json={"weight": 70, "height": 170, "gender": "Female", "dietType": "Vegan", "age": 25}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["bmi"] == 24.2
        assert data["status"] == "Healthy"
        assert data["plan"][0] == "Oats, almond milk, salad"

    def test_obese_profile(self, client):
        data = client.post("/api/bmi", json={"weight": 120, "height": 175, "dietType": "Non-Veg"}).json()
        assert data["status"] == "Obese"
        assert data["plan"][0] == "Oats, grilled chicken, salad"

    def test_out_of_range_weight_is_422(self, client):
        response = client.post("/api/bmi", json={"weight": 10, "height": 170})
        assert response.status_code == 422

    def test_unknown_gender_is_422(self, client):
        response = client.post("/api/bmi", json={"weight": 70, "height": 170, "gender": "Other"})
        assert response.status_code == 422
