"""
Renders a generated unit resource into a PDF.

The page is laid out by a Jinja2 HTML template and printed by weasyprint:
the logo centered at the top, then a bold underlined header and subheader,
then the generated text as the body.
"""

from jinja2 import Environment, FileSystemLoader, select_autoescape
from io import BytesIO
import base64, logging, os

from brainstorm_v1.helpers.errors import RenderError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

RESOURCES_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "resources")
LOGO_PATH = os.path.join(RESOURCES_DIR, "logo.png")

EXAM_SUBHEADER = "CAT I SEM I 2023/2024"
NOTES_SUBHEADER = "NOTES"

# Layout in points
LAYOUT = {
    "page_size": "A4",
    "logo_top": 10,
    "logo_size": 60,
    "header_size": 14,
    "header_gap": 8,
    "subheader_size": 12,
    "subheader_gap": 6,
    "underline": 1,
    "body_gap": 28,
    "body_size": 12,
    "line_height": 20,
    "margin": 50
}

env = Environment(
    loader=FileSystemLoader(RESOURCES_DIR),
    autoescape=select_autoescape(["html", "xml"])
)

def makeHeader(unit_code, unit_name):
    return f"{unit_code} {unit_name}".upper()

def makeSubheader(is_notes):
    return NOTES_SUBHEADER if is_notes else EXAM_SUBHEADER

def _load_logo(path=LOGO_PATH):
    with open(path, "rb") as f:
        return "data:image/png;base64," + base64.b64encode(f.read()).decode("ascii")

def renderResourceHtml(unit_code, unit_name, is_notes, content, logo_path=LOGO_PATH):
    html_template = env.get_template("resource.html")
    return html_template.render(
        header=makeHeader(unit_code, unit_name),
        subheader=makeSubheader(is_notes),
        content=content,
        logo=_load_logo(logo_path),
        layout=LAYOUT
    )

def _write_pdf(html):
    # weasyprint needs Pango at import time, only load it when printing
    from weasyprint import HTML

    pdf_io = BytesIO()
    HTML(string=html, base_url=RESOURCES_DIR).write_pdf(pdf_io)
    return pdf_io.getvalue()

def generateResourcePdf(unit_code, unit_name, is_notes, content, logo_path=LOGO_PATH):
    try:
        html = renderResourceHtml(unit_code, unit_name, is_notes, content, logo_path)
        pdf_bytes = _write_pdf(html)
    except Exception as e:
        raise RenderError(f"Failed to render resource PDF for unit {unit_code}") from e

    logger.info(f"Rendered {len(pdf_bytes)} byte PDF for unit {unit_code}")
    return pdf_bytes
