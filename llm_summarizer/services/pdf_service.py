import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from fpdf import FPDF, XPos, YPos
from fpdf.errors import FPDFException

from ..errors import RenderError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_MARGIN = 10
_PAGE_WIDTH = 210
_TEXT_WIDTH = 190  # A4 (210) minus two margins
_BREAK_MARGIN = 20

ATTRIBUTION = "Pennsieve LLM Summarizer"
REPORT_SUFFIX = "-summary.pdf"

_UNICODE_REPLACEMENTS = {
    "\u2014": "--",   # em dash
    "\u2013": "-",    # en dash
    "\u2018": "'",    # left single quote
    "\u2019": "'",    # right single quote / apostrophe
    "\u201c": '"',    # left double quote
    "\u201d": '"',    # right double quote
    "\u2026": "...",  # ellipsis
    "\u00a0": " ",    # non-breaking space
    "\u2022": "-",    # bullet
    "\u2212": "-",    # minus sign
    "\u2192": "->",
}


def _sanitize(text: str) -> str:
    # Core fonts only cover Latin-1.
    for char, repl in _UNICODE_REPLACEMENTS.items():
        text = text.replace(char, repl)
    return text.encode("latin-1", errors="replace").decode("latin-1")


def report_path(output_dir: Path, input_path: Path) -> Path:
    return output_dir / f"{input_path.stem}{REPORT_SUFFIX}"


def _divider(pdf: FPDF) -> None:
    pdf.set_draw_color(200, 200, 200)
    pdf.line(_MARGIN, pdf.get_y(), _PAGE_WIDTH - _MARGIN, pdf.get_y())
    pdf.ln(6)


# ---------------------------------------------------------------------------
# PDF class
# ---------------------------------------------------------------------------

class _SummaryPDF(FPDF):
    def footer(self) -> None:
        self.set_y(-14)
        self.set_font("Helvetica", "I", 8)
        self.set_text_color(170, 170, 170)
        self.cell(0, 10, text=f"LLM Summarizer  |  Page {self.page_no()}", align="C")


# ---------------------------------------------------------------------------
# Public interface
# ---------------------------------------------------------------------------

def generate_pdf(title: str, body: str, generated_at: Optional[datetime] = None) -> bytes:
    generated_at = generated_at or datetime.now(timezone.utc)

    pdf = _SummaryPDF(orientation="P", unit="mm", format="A4")
    pdf.set_auto_page_break(auto=True, margin=_BREAK_MARGIN)
    pdf.set_margins(_MARGIN, _MARGIN, _MARGIN)
    pdf.add_page()

    # ── Title ──────────────────────────────────────────────────────────────
    pdf.set_font("Helvetica", "B", 18)
    pdf.set_text_color(0, 0, 0)
    pdf.cell(
        0, 12,
        text=_sanitize(f"Dataset Summary: {title}"),
        align="L",
        new_x=XPos.LMARGIN,
        new_y=YPos.NEXT,
    )
    pdf.ln(4)

    # ── Metadata ───────────────────────────────────────────────────────────
    stamp = generated_at.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    pdf.set_font("Helvetica", "", 9)
    pdf.set_text_color(128, 128, 128)
    pdf.cell(
        0, 5,
        text=f"Generated {stamp} by {ATTRIBUTION}",
        align="L",
        new_x=XPos.LMARGIN,
        new_y=YPos.NEXT,
    )
    pdf.ln(6)

    # ── Divider ────────────────────────────────────────────────────────────
    _divider(pdf)

    # ── Summary body ───────────────────────────────────────────────────────
    pdf.set_font("Helvetica", "", 11)
    pdf.set_text_color(0, 0, 0)
    pdf.multi_cell(_TEXT_WIDTH, 6, text=_sanitize(body), align="L")

    return bytes(pdf.output())


def write_report(
    path: Path,
    title: str,
    body: str,
    generated_at: Optional[datetime] = None,
) -> Path:
    """Render the report and write it to ``path``, replacing any existing file.

    The PDF is built in memory, written to a sibling temp file and then
    moved into place, so a failure never leaves a half-written report.
    """
    try:
        data = generate_pdf(title, body, generated_at)
    except FPDFException as exc:
        raise RenderError(f"Failed to generate PDF: {exc}", path=path) from exc

    tmp_path = path.with_name(path.name + ".tmp")
    try:
        tmp_path.write_bytes(data)
        os.replace(tmp_path, path)
    except OSError as exc:
        tmp_path.unlink(missing_ok=True)
        raise RenderError(f"Failed to write PDF: {exc}", path=path) from exc

    logger.debug("Rendered %s (%d bytes)", path, len(data))
    return path
