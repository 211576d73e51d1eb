"""Property-based tests for profile form step validation.

Hypothesis generates arbitrary text and tag lists to check that the step
rules hold for any input, not just the hand-picked cases in
test_profile_wizard.py.
"""

from hypothesis import given
from hypothesis import strategies as st

from careercampus.services.profile_wizard import (
    ProfileDraft,
    ProfileWizard,
    WizardStep,
    missing_fields,
)

# =============================================================================
# Strategies
# =============================================================================

# Any Unicode text except surrogates
any_text = st.text(alphabet=st.characters(blacklist_categories=("Cs",)))

# Text made only of characters str.strip() removes
whitespace_text = st.text(alphabet=st.sampled_from(" \t\n\r\x0b\x0c\u00a0\u3000"))

tag_lists = st.lists(any_text, max_size=10)


# =============================================================================
# Step 2
# =============================================================================


class TestAcademicsStepProperties:
    """Step 2 blocks exactly when a field is blank."""

    @given(background=whitespace_text, grades=any_text)
    def test_blank_background_always_blocks(self, background, grades):
        """A whitespace-only background is always missing."""
        draft = ProfileDraft(academic_background=background, grades=grades)
        assert "academicBackground" in missing_fields(draft, WizardStep.ACADEMICS)

    @given(background=any_text, grades=whitespace_text)
    def test_blank_grades_always_block(self, background, grades):
        """Whitespace-only grades are always missing."""
        draft = ProfileDraft(academic_background=background, grades=grades)
        assert "grades" in missing_fields(draft, WizardStep.ACADEMICS)

    @given(background=any_text, grades=any_text)
    def test_missing_matches_blankness(self, background, grades):
        """Each field is reported exactly when it strips to empty."""
        draft = ProfileDraft(academic_background=background, grades=grades)
        expected = []
        if not background.strip():
            expected.append("academicBackground")
        if not grades.strip():
            expected.append("grades")
        assert missing_fields(draft, WizardStep.ACADEMICS) == expected

    @given(grades=whitespace_text)
    def test_wizard_never_advances_on_blank_grades(self, grades):
        """next_step() keeps the wizard on step 2 for blank grades."""
        wizard = ProfileWizard(name="Asha")
        wizard.next_step()
        wizard.draft.academic_background = "Commerce"
        wizard.draft.grades = grades
        assert wizard.can_advance() is False


# =============================================================================
# Step 3
# =============================================================================


class TestInterestsStepProperties:
    """Step 3 needs one non-blank interest or skill."""

    @given(interests=st.lists(whitespace_text), skills=st.lists(whitespace_text))
    def test_blank_tags_never_satisfy_step(self, interests, skills):
        """Lists of blank tags count as no tags at all."""
        draft = ProfileDraft(interests=interests, skills=skills)
        assert missing_fields(draft, WizardStep.INTERESTS) == ["interests"]

    @given(interests=tag_lists, skills=tag_lists)
    def test_missing_matches_non_blank_tags(self, interests, skills):
        """The step validates exactly when some tag has content."""
        draft = ProfileDraft(interests=interests, skills=skills)
        has_tag = any(t.strip() for t in interests + skills)
        assert (missing_fields(draft, WizardStep.INTERESTS) == []) is has_tag
