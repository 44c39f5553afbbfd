"""
This is the /generate-and-upload endpoint route
for generating a unit resource with an LLM and publishing it as a PDF.

It contains the endpoint:
- POST /generate-and-upload: Generates a CAT or notes for a unit, renders it
to a PDF, uploads the PDF to S3 and records it in PostgreSQL.
"""

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse
from typing import Any
import logging

from brainstorm_v1.helpers.completion import getCompletion
from brainstorm_v1.helpers.errors import ResourceGenerationError
from brainstorm_v1.helpers.models import ErrorResponse, GenerateResourceResponse
from brainstorm_v1.helpers.rendering import generateResourcePdf
from brainstorm_v1.helpers.resources import createResource
from brainstorm_v1.helpers.storage import uploadResourcePdf

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Resource generated, uploaded, and saved successfully"
FAILURE_MESSAGE = "Failed to generate and upload resource"

router = APIRouter(tags=["generate_and_upload"])

def _error_response(status_code):
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=FAILURE_MESSAGE).model_dump()
    )

@router.post(
    "/generate-and-upload",
    summary="Generate, upload and save a unit resource",
    responses={500: {"model": ErrorResponse}},
    description="""
Generate an assessment or notes for a unit and publish it as a PDF.

**What it does**
- Asks the completion provider for a 40 mark CAT for the given unit.
- Renders a PDF with the logo, the uppercased `unitCode unitName` header and a
`NOTES` or CAT subheader, followed by the generated text.
- Uploads the PDF to S3 as `<unix-millis>_<unitCode>_resource.pdf`.
- Saves a resource record pointing at the uploaded file.

**Body**
- `unitCode` *(str)* — Unit code, e.g. `CS101`.
- `unitName` *(str)* — Unit name.
- `isNotes` *(bool, optional)* — Label the resource as notes instead of a CAT.

**Responses**
- `200 OK` — Returns `{"message": "...", "resource": {...}}` with the saved record.
- `500 Internal Server Error` — Returns `{"error": "..."}` if any step fails.
"""
)
def generate_and_upload(
    request: Request,
    payload: Any = Body(None)
):
    logger.info(f"Received resource request: {payload}")
    if not isinstance(payload, dict):
        payload = {}
    unit_code = payload.get("unitCode")
    unit_name = payload.get("unitName")
    is_notes = payload.get("isNotes")

    state = request.app.state
    try:
        content = getCompletion(getattr(state, "llm", None), unit_code, unit_name)
        pdf_bytes = generateResourcePdf(unit_code, unit_name, is_notes, content)
        file_uri = uploadResourcePdf(getattr(state, "s3", None), pdf_bytes, unit_code)
        resource = createResource(getattr(state, "postgresql_db", None), file_uri, unit_code, unit_name, is_notes)
    except ResourceGenerationError as e:
        logger.error(f"Error in generating or uploading resource: {e}")
        return _error_response(e.status_code)
    except Exception as e:
        logger.error(f"Unexpected error in generating or uploading resource: {type(e).__name__}: {e}")
        return _error_response(500)

    response = GenerateResourceResponse(message=SUCCESS_MESSAGE, resource=resource)
    return JSONResponse(
        status_code=200,
        content=response.model_dump(mode="json", by_alias=True)
    )
