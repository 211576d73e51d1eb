"""Tests for the onboarding API router."""

import pytest

_OPTIONS_URL = "/api/v1/onboarding/options"
_PROFILE_URL = "/api/v1/onboarding/profile"


def _form(**overrides) -> dict:
    body = {
        "name": "Asha Rao",
        "stage": "POST_12TH",
        "academicBackground": "Commerce with Maths",
        "grades": "91%",
        "interests": ["Finance"],
        "skills": [],
        "preferredWorkEnvironment": "Hybrid",
    }
    body.update(overrides)
    return body


class TestOptions:
    """Tests for GET /onboarding/options."""

    @pytest.mark.asyncio
    async def test_returns_form_choices(self, client):
        """Options list tags, stages and countries."""
        response = await client.get(_OPTIONS_URL)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["steps"] == [1, 2, 3]
        assert len(data["interestTags"]) == 16
        assert len(data["skillTags"]) == 14
        assert data["stages"][0] == {
            "value": "POST_12TH",
            "label": "Finished 12th Grade (High School)",
        }
        assert data["workEnvironments"] == ["On-site", "Hybrid", "Remote"]
        assert data["defaultWorkEnvironment"] == "Hybrid"
        assert data["defaultAtsCountry"] == "India"
        assert "European Countries" in data["atsCountries"]


class TestValidateProfile:
    """Tests for POST /onboarding/profile."""

    @pytest.mark.asyncio
    async def test_complete_form_returns_profile(self, client):
        """A valid form comes back as a camelCase profile."""
        response = await client.post(_PROFILE_URL, json=_form(name="  Asha Rao "))

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["name"] == "Asha Rao"
        assert data["academicBackground"] == "Commerce with Maths"
        assert data["interests"] == ["Finance"]
        assert data["preferredWorkEnvironment"] == "Hybrid"

    @pytest.mark.asyncio
    async def test_skill_without_interest_is_accepted(self, client):
        """A single skill satisfies step 3."""
        response = await client.post(
            _PROFILE_URL, json=_form(interests=[], skills=["Coding"])
        )
        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_blank_name_reports_step_one(self, client):
        """A blank name fails step 1."""
        response = await client.post(_PROFILE_URL, json=_form(name="   "))

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["message"] == "Step 1 is incomplete."
        assert error["details"] == [{"step": 1, "field": "name"}]

    @pytest.mark.asyncio
    async def test_whitespace_grades_report_step_two(self, client):
        """Whitespace grades fail step 2."""
        response = await client.post(_PROFILE_URL, json=_form(grades="  "))

        assert response.status_code == 400
        assert response.json()["error"]["details"] == [{"step": 2, "field": "grades"}]

    @pytest.mark.asyncio
    async def test_no_tags_report_step_three(self, client):
        """Step 3 needs an interest or a skill."""
        response = await client.post(_PROFILE_URL, json=_form(interests=[]))

        assert response.status_code == 400
        assert response.json()["error"]["details"] == [
            {"step": 3, "field": "interests"}
        ]

    @pytest.mark.asyncio
    async def test_whitespace_tags_report_step_three(self, client):
        """Blank tags do not count toward step 3."""
        response = await client.post(
            _PROFILE_URL, json=_form(interests=["  "], skills=[" \t"])
        )

        assert response.status_code == 400
        assert response.json()["error"]["details"] == [
            {"step": 3, "field": "interests"}
        ]

    @pytest.mark.asyncio
    async def test_unknown_stage_is_rejected(self, client):
        """Stage must be one of the enum values."""
        response = await client.post(_PROFILE_URL, json=_form(stage="PHD"))
        assert response.status_code == 400
