"""Resume draft PDF rendering.

Renders a generated Markdown resume into a downloadable PDF using ReportLab
Platypus. The Markdown is laid out as plain text: headings, bullets and
emphasis markers are kept verbatim, one paragraph per line, with page
breaks handled by the document template.

Public API:
- render_resume_draft_pdf: resume text + name → PDF bytes
- resume_pdf_filename: download filename for a user name
"""

import io
import re
from xml.sax.saxutils import (
    escape as _xml_escape,  # nosec B406: output escaping, not XML parsing
)

from reportlab.lib.enums import TA_LEFT
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import (
    HRFlowable,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
)

_WHITESPACE_RUN = re.compile(r"\s+")

PDF_TITLE_PREFIX = "Resume Draft - "
PDF_FILENAME_SUFFIX = "_Resume_Draft.pdf"

# =============================================================================
# Styles
# =============================================================================

_MARGIN_SIDE = 15 * mm
_MARGIN_TOP = 20 * mm
_MARGIN_BOTTOM = 17 * mm
_LINE_SPACING = 6


def _build_styles() -> dict[str, ParagraphStyle]:
    """Build paragraph styles for resume draft rendering."""
    base = getSampleStyleSheet()

    return {
        "title": ParagraphStyle(
            "ResumeTitle",
            parent=base["Heading1"],
            fontName="Helvetica-Bold",
            fontSize=16,
            leading=20,
            alignment=TA_LEFT,
            spaceAfter=4,
        ),
        "body": ParagraphStyle(
            "ResumeBody",
            parent=base["Normal"],
            fontName="Helvetica",
            fontSize=11,
            leading=_LINE_SPACING + 8,
            alignment=TA_LEFT,
        ),
    }


# =============================================================================
# Public API
# =============================================================================


def resume_pdf_filename(user_name: str) -> str:
    """Build the download filename, e.g. "Asha_Rao_Resume_Draft.pdf".

    Whitespace runs in the name become a single underscore.
    """
    return f"{_WHITESPACE_RUN.sub('_', user_name)}{PDF_FILENAME_SUFFIX}"


def render_resume_draft_pdf(resume_text: str, user_name: str) -> bytes:
    """Render a resume draft into a PDF document.

    Uses ReportLab Platypus with standard Helvetica fonts.

    Args:
        resume_text: Generated resume (Markdown, newlines preserved).
        user_name: Name shown in the "Resume Draft - {name}" title.

    Returns:
        PDF file as bytes.
    """
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=_MARGIN_SIDE,
        rightMargin=_MARGIN_SIDE,
        topMargin=_MARGIN_TOP,
        bottomMargin=_MARGIN_BOTTOM,
        title=f"{PDF_TITLE_PREFIX}{user_name}",
    )

    styles = _build_styles()
    elements: list[object] = []

    # ReportLab Paragraph interprets XML markup; escape all user text.
    esc = _xml_escape

    elements.append(Paragraph(esc(f"{PDF_TITLE_PREFIX}{user_name}"), styles["title"]))
    elements.append(
        HRFlowable(
            width="100%",
            thickness=0.5,
            color="black",
            spaceAfter=_LINE_SPACING,
        )
    )

    for line in resume_text.splitlines():
        cleaned = line.rstrip()
        if cleaned:
            elements.append(Paragraph(esc(cleaned), styles["body"]))
        else:
            elements.append(Spacer(1, _LINE_SPACING))

    doc.build(elements)
    return buffer.getvalue()
