"""Prompt templates for career recommendations, resume drafts, and ATS audits.

Contains three prompt sets:
1. Career Paths: counselor system prompt plus a four-path request
2. Resume Draft: ATS-friendly Markdown resume from the profile
3. ATS Analysis: recruiter-style audit for a target country
"""

from careercampus.schemas.profile import UserProfile

# =============================================================================
# Career Paths
# =============================================================================

CAREER_COUNSELOR_SYSTEM_PROMPT = """\
You are an expert career counselor and labor market analyst specializing in \
the Indian Job Market and Global Trends (2024-2025).
Your goal is to provide highly personalized, data-driven career advice for \
students and job seekers from ALL backgrounds (Science, Commerce, Arts, \
Humanities, Vocational).

The user is either:
1. A student who just finished 12th grade (Post 12th). They need advice on \
Majors, Degrees, and long-term career paths.
2. A Graduate/Job Seeker. They need advice on specific Job Roles, Upskilling, \
and immediate career pivoting.

Context & Constraints:
- Primary Market: India and Global.
- Currency: ALWAYS use INR (₹) for salary ranges. If a role is international \
(e.g., remote US job), convert the salary estimate to INR. DO NOT use the '$' symbol.
- Salaries: Be realistic for the Indian market context (e.g., Entry level \
B.Tech vs B.A.).
- Diversity: Suggest paths relevant to their specific academic stream \
(e.g., if Arts, suggest Journalism, Design, Policy, etc., not just Tech)."""

_PROFILE_CONTEXT_TEMPLATE = """\
User Profile:
- Name: {name}
- Stage: {stage}
- Academic Background: {academic_background}
- Grades/Performance: {grades}
- Interests: {interests}
- Skills: {skills}
- Work Environment Preference: {work_environment}"""

_CAREER_PATHS_TEMPLATE = """\
Based on the profile below, analyze their potential and suggest 4 distinct \
career paths.

1. "Safe/Traditional": A steady path with good job security in India.
2. "Ambitious/High Growth": High paying, trending, competitive (e.g., AI, \
Fintech, Specialized Law).
3. "Creative/Alternative": Non-traditional or passion-based.
4. "Global/Remote Friendly": A path that allows working for international \
clients or migration.

{profile_context}"""


def build_profile_context(profile: UserProfile) -> str:
    """Render the profile block embedded in the career paths prompt."""
    work_environment = (
        profile.preferred_work_environment.value
        if profile.preferred_work_environment
        else "Any"
    )
    return _PROFILE_CONTEXT_TEMPLATE.format(
        name=profile.name,
        stage=profile.stage.label,
        academic_background=profile.academic_background,
        grades=profile.grades,
        interests=", ".join(profile.interests),
        skills=", ".join(profile.skills),
        work_environment=work_environment,
    )


def build_career_paths_prompt(profile: UserProfile) -> str:
    """Build the user prompt asking for four distinct career paths.

    Args:
        profile: The submitted user profile.

    Returns:
        Formatted user prompt string.
    """
    return _CAREER_PATHS_TEMPLATE.format(profile_context=build_profile_context(profile))


# =============================================================================
# Resume Draft
# =============================================================================

_RESUME_DRAFT_TEMPLATE = """\
Create a professional, ATS-friendly Resume/CV structure in Markdown format \
for the following user.
Context: They are looking for opportunities in the Indian and Global market.

Profile:
- Name: {name}
- Stage: {stage}
- Academics: {academic_background} ({grades})
- Skills: {skills}
- Interests: {interests}

Instructions:
- Use standard ATS headings (Summary, Education, Skills, Projects/Experience).
- Write a compelling Professional Summary.
- If they are a student (Post 12th), focus on Education, key coursework, and \
extra-curriculars.
- If they are a graduate, include placeholder sections for "Experience" with \
tips on what to write.
- Format neatly with Markdown."""


def build_resume_draft_prompt(profile: UserProfile) -> str:
    """Build the resume draft prompt.

    Args:
        profile: The submitted user profile.

    Returns:
        Formatted prompt string.
    """
    return _RESUME_DRAFT_TEMPLATE.format(
        name=profile.name,
        stage=profile.stage.value,
        academic_background=profile.academic_background,
        grades=profile.grades,
        skills=", ".join(profile.skills),
        interests=", ".join(profile.interests),
    )


# =============================================================================
# ATS Analysis
# =============================================================================

_ATS_ANALYSIS_TEMPLATE = """\
Act as an advanced Application Tracking System (ATS) and Recruiter for {country}.
Analyze the following resume text.

Criteria:
- Keyword density and relevance (General professional standards).
- Formatting and Readability (Structure).
- Impact verbs and quantification.
- Specific norms for {country} (e.g., Photo usage, personal details, length).

Resume Text:
"{resume_text}\""""


def build_ats_analysis_prompt(resume_text: str, country: str) -> str:
    """Build the ATS audit prompt.

    The caller is responsible for truncating ``resume_text``.

    Args:
        resume_text: Resume text to audit.
        country: Target market (e.g., "India").

    Returns:
        Formatted prompt string.
    """
    return _ATS_ANALYSIS_TEMPLATE.format(country=country, resume_text=resume_text)
