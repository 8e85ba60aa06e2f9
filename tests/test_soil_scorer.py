from __future__ import annotations

import math

import pytest

from krishi.core.abstractions import MissingSoilValue, MissingValuePolicy, SoilFlag, SoilSample
from krishi.core.services.soil import SoilHealthScorer, build_soil_report, urea_dose


def make_sample(ph=6.8, nitrogen=200, phosphorus=25, potassium=150, organic=3.0, moisture=25.0) -> SoilSample:
    return SoilSample(
        ph=ph,
        nitrogen=nitrogen,
        phosphorus=phosphorus,
        potassium=potassium,
        organic_matter_percent=organic,
        moisture_percent=moisture,
        temperature_celsius=24.0,
        region="Maharashtra",
    )


@pytest.fixture
def scorer() -> SoilHealthScorer:
    return SoilHealthScorer()


def test_ideal_sample_scores_full_marks(scorer):
    result = scorer.score(make_sample())

    assert result.health_score == 100
    assert result.deficiency_flags == ()


def test_poor_sample_scores_minimum_tiers_with_all_flags(scorer):
    result = scorer.score(make_sample(ph=5.0, nitrogen=80, phosphorus=8, potassium=60, organic=1.0))

    assert result.health_score == 10
    assert result.deficiency_flags == (
        SoilFlag.PH_LOW,
        SoilFlag.NITROGEN,
        SoilFlag.PHOSPHORUS,
        SoilFlag.POTASSIUM,
        SoilFlag.ORGANIC_MATTER,
        SoilFlag.CRITICAL,
    )


@pytest.mark.parametrize(
    "ph, nitrogen, phosphorus, potassium, organic",
    [
        (6.0, 150, 15, 120, 2.5),
        (7.5, 300, 40, 250, 2.5),
        (6.9, 222, 33, 199, 9.0),
    ],
)
def test_boundaries_belong_to_the_better_band(scorer, ph, nitrogen, phosphorus, potassium, organic):
    sample = make_sample(ph=ph, nitrogen=nitrogen, phosphorus=phosphorus, potassium=potassium, organic=organic)

    assert scorer.score(sample).health_score == 100


def test_second_band_values(scorer):
    # 15 + 10 + 10 + 10 + 15
    sample = make_sample(ph=8.0, nitrogen=100, phosphorus=10, potassium=80, organic=1.5)

    result = scorer.score(sample)

    assert result.health_score == 60
    assert result.deficiency_flags == (
        SoilFlag.NITROGEN,
        SoilFlag.PHOSPHORUS,
        SoilFlag.POTASSIUM,
        SoilFlag.ORGANIC_MATTER,
    )


def test_nutrients_have_no_upper_clamp(scorer):
    sample = make_sample(nitrogen=10000, phosphorus=500, potassium=9000)

    # pH 20 + N/P/K 10 each + organic matter 20
    assert scorer.score(sample).health_score == 70


def test_high_ph_is_flagged_after_low_ph_slot(scorer):
    result = scorer.score(make_sample(ph=8.5, nitrogen=120))

    assert result.deficiency_flags == (SoilFlag.PH_HIGH, SoilFlag.NITROGEN)
    assert result.health_score == 5 + 10 + 20 + 20 + 20


def test_organic_matter_flag_threshold_differs_from_band(scorer):
    # 2.2% sits in the second band but above the 2.0% flag threshold.
    result = scorer.score(make_sample(organic=2.2))

    assert result.health_score == 95
    assert SoilFlag.ORGANIC_MATTER not in result.deficiency_flags


def test_critical_flag_only_below_fifty(scorer):
    # 15 + 0 + 10 + 0 + 15 = 40
    low = scorer.score(make_sample(ph=5.5, nitrogen=0, phosphorus=10, potassium=0, organic=1.5))
    # 20 + 0 + 10 + 10 + 15 = 55
    fair = scorer.score(make_sample(nitrogen=0, phosphorus=10, potassium=80, organic=1.5))

    assert low.health_score == 40
    assert low.deficiency_flags[-1] is SoilFlag.CRITICAL
    assert fair.health_score == 55
    assert SoilFlag.CRITICAL not in fair.deficiency_flags


@pytest.mark.parametrize(
    "values",
    [
        (-3.0, -100, -5, -1, -2.0),
        (14.0, 1e9, 1e9, 1e9, 100.0),
        (0, 0, 0, 0, 0),
    ],
)
def test_score_is_always_bounded(scorer, values):
    ph, nitrogen, phosphorus, potassium, organic = values
    result = scorer.score(make_sample(ph=ph, nitrogen=nitrogen, phosphorus=phosphorus, potassium=potassium, organic=organic))

    assert 0 <= result.health_score <= 100


def test_nan_measurement_scores_minimum_tier(scorer):
    result = scorer.score(make_sample(ph=math.nan))

    assert result.health_score == 85
    assert result.deficiency_flags == ()


def test_from_mapping_defaults_missing_values_to_zero():
    sample = SoilSample.from_mapping({"pH": 6.5, "nitrogen": 200})

    assert sample.ph == 6.5
    assert sample.phosphorus == 0.0
    assert sample.organic_matter_percent == 0.0
    assert sample.region is None


def test_from_mapping_reject_policy_lists_missing_fields():
    with pytest.raises(MissingSoilValue) as excinfo:
        SoilSample.from_mapping({"pH": 6.5, "nitrogen": 200}, policy=MissingValuePolicy.REJECT)

    assert excinfo.value.fields == ("phosphorus", "potassium", "organicMatter", "moisture", "temperature")


def test_report_for_poor_soil(scorer):
    sample = make_sample(ph=5.0, nitrogen=80, phosphorus=8, potassium=60, organic=1.0, moisture=10)
    report = build_soil_report(sample, scorer.score(sample))

    assert report["healthScore"] == 10
    assert report["deficiencyFlags"] == [
        "ph-low", "nitrogen", "phosphorus", "potassium", "organic-matter", "critical",
    ]
    assert len(report["recommendations"]) == 6
    assert report["recommendations"][0].startswith("मिट्टी में चूना")
    assert report["recommendations"][-1] == "Apply urea (46-0-0) at 120-150 kg/hectare"
    assert report["fertilizer"]["chemical"] == ["यूरिया (46% N) - 130 किलो प्रति हेक्टेयर"]
    assert report["irrigation"]["frequency"] == "सप्ताह में 3-4 बार"
    assert len(report["alerts"]) == 1


def test_report_for_healthy_soil(scorer):
    sample = make_sample(nitrogen=50.0, moisture=30)
    report = build_soil_report(sample, scorer.score(sample))

    assert report["alerts"] == []
    assert report["irrigation"]["frequency"] == "सप्ताह में 2-3 बार"
    assert report["fertilizer"]["chemical"] == ["यूरिया (46% N) - 150 किलो प्रति हेक्टेयर"]
    assert len(report["suitableCrops"]) == 15


def test_urea_dose_floor():
    assert urea_dose(0) == 200
    assert urea_dose(70) == 130
    assert urea_dose(500) == 130
