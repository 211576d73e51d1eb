"""Tests for the resume tools API router."""

import pytest

from careercampus.api.v1.resumes import _content_disposition
from careercampus.providers.errors import AuthenticationError
from careercampus.providers.llm.base import TaskType
from tests.conftest import SAMPLE_RESUME_MARKDOWN


@pytest.fixture
def profile_body(sample_profile) -> dict:
    """The sample profile as a request body."""
    return sample_profile.model_dump(by_alias=True, mode="json")


class TestResumeDraft:
    """Tests for POST /resumes/draft."""

    @pytest.mark.asyncio
    async def test_returns_markdown(self, client, mock_llm, profile_body):
        """The generated Markdown is returned."""
        response = await client.post("/api/v1/resumes/draft", json=profile_body)

        assert response.status_code == 200
        assert response.json()["data"]["markdown"] == SAMPLE_RESUME_MARKDOWN

    @pytest.mark.asyncio
    async def test_empty_reply_returns_fallback(self, client, mock_llm, profile_body):
        """An empty model reply returns the fallback text."""
        mock_llm.set_response(TaskType.RESUME_DRAFT, "")

        response = await client.post("/api/v1/resumes/draft", json=profile_body)

        assert response.json()["data"]["markdown"] == "Could not generate resume."

    @pytest.mark.asyncio
    async def test_failure_returns_502(self, client, mock_llm, profile_body):
        """Provider failures return the resume failure message."""
        mock_llm.set_error(TaskType.RESUME_DRAFT, AuthenticationError("bad key"))

        response = await client.post("/api/v1/resumes/draft", json=profile_body)

        assert response.status_code == 502
        assert response.json()["error"]["message"] == "Failed to generate resume."

    @pytest.mark.asyncio
    async def test_profile_without_tags_is_rejected(
        self, client, mock_llm, profile_body
    ):
        """Drafting needs a profile with at least one interest or skill."""
        profile_body["interests"] = []
        profile_body["skills"] = ["\t"]

        response = await client.post("/api/v1/resumes/draft", json=profile_body)

        assert response.status_code == 400
        assert mock_llm.calls == []


class TestAtsAnalysis:
    """Tests for POST /resumes/ats-analysis."""

    @pytest.mark.asyncio
    async def test_returns_analysis(self, client, mock_llm):
        """A valid request returns the ATS audit."""
        response = await client.post(
            "/api/v1/resumes/ats-analysis",
            json={"resumeText": "My resume", "country": "USA"},
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["score"] == 72
        assert data["missingKeywords"] == ["SQL", "Stakeholder management"]
        prompt = mock_llm.calls[0]["messages"][0].content
        assert "Recruiter for USA" in prompt

    @pytest.mark.asyncio
    async def test_blank_text_is_rejected(self, client, mock_llm):
        """Empty resume text is a validation error and calls no model."""
        response = await client.post(
            "/api/v1/resumes/ats-analysis", json={"resumeText": "  "}
        )

        assert response.status_code == 400
        assert mock_llm.calls == []

    @pytest.mark.asyncio
    async def test_malformed_output_returns_502(self, client, mock_llm):
        """Unparseable model output returns the ATS failure message."""
        mock_llm.set_response(TaskType.ATS_ANALYSIS, "{")

        response = await client.post(
            "/api/v1/resumes/ats-analysis", json={"resumeText": "My resume"}
        )

        assert response.status_code == 502
        assert response.json()["error"]["message"] == "Failed to analyze resume."


class TestResumePdf:
    """Tests for POST /resumes/pdf."""

    @pytest.mark.asyncio
    async def test_returns_pdf_attachment(self, client):
        """The draft is returned as a named PDF download."""
        response = await client.post(
            "/api/v1/resumes/pdf",
            json={"resumeText": SAMPLE_RESUME_MARKDOWN, "name": "Asha Rao"},
        )

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert 'filename="Asha_Rao_Resume_Draft.pdf"' in (
            response.headers["content-disposition"]
        )
        assert response.content.startswith(b"%PDF")

    def test_non_ascii_name_has_utf8_filename(self):
        """Non-ASCII names fall back to ASCII and keep a UTF-8 form."""
        header = _content_disposition("Ānanya")
        assert 'filename="nanya_Resume_Draft.pdf"' in header
        assert "filename*=UTF-8''%C4%80nanya_Resume_Draft.pdf" in header

    def test_fully_non_ascii_name_uses_generic_filename(self):
        """A name with no ASCII characters uses a generic fallback."""
        header = _content_disposition("अनन्या")
        assert 'filename="Resume_Draft.pdf"' in header
