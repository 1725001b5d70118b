"""FastAPI application for image + table PDF report generation.

Usage:
    python -m report_engine.api.app
    # => Uvicorn running on http://0.0.0.0:8000
"""
import logging
from typing import Optional
from urllib.parse import quote

from fastapi import FastAPI, File, Form, HTTPException, UploadFile, status
from fastapi.responses import Response

from ..config import Config
from ..errors import MalformedTable, MissingInput, ReportInputError
from ..services import (
    default_footer_fields,
    generate_report,
    parse_csv,
    parse_metadata,
    resolve_header_fields,
)
from .schemas import ErrorResponse, HealthResponse

logger = logging.getLogger("ReportEngine.API")

app = FastAPI(
    title=Config.API_TITLE,
    description="Builds a PDF report from an image, a CSV table and metadata",
    version="1.0.0"
)


@app.post(
    "/api/pdf/generate",
    response_class=Response,
    responses={
        200: {"content": {"application/pdf": {}}, "description": "PDF generated successfully"},
        400: {"model": ErrorResponse, "description": "Missing or invalid input"},
        500: {"model": ErrorResponse, "description": "Generation failed"}
    }
)
async def generate_pdf(
    image: Optional[UploadFile] = File(None),
    tableData: Optional[UploadFile] = File(None),
    metadata: Optional[str] = Form(None),
):
    """
    Generate the report PDF.

    Form fields: `image` (file), `tableData` (CSV file), `metadata`
    (JSON list `[title, inspector, dateRange]` or object with `Title`,
    `ProductName`, `DateRange`).
    """
    try:
        if image is None or tableData is None or metadata is None or not metadata.strip():
            raise MissingInput("Missing image, CSV file, or metadata.")

        table_data = parse_csv(await tableData.read())
        if len(table_data) < 2:
            raise MalformedTable("CSV must contain a header row and at least one data row.")

        header_fields = resolve_header_fields(parse_metadata(metadata))
        image_bytes = await image.read()

        report = generate_report(
            image_bytes,
            table_data,
            header_fields,
            default_footer_fields(),
        )

        return Response(
            content=report.content,
            media_type=report.media_type,
            headers={"Content-Disposition": content_disposition(report.filename)}
        )

    except ReportInputError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        logger.exception("Error generating PDF")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Internal server error: {str(e)}"
        )


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "pdf-report-generator"}


def content_disposition(filename: str) -> str:
    """Attachment header with an ASCII fallback and the UTF-8 name."""
    fallback = filename.encode("ascii", "replace").decode("ascii").replace('"', "'")
    return f'attachment; filename="{fallback}"; filename*=UTF-8\'\'{quote(filename)}'


def main() -> None:
    import uvicorn

    logging.basicConfig(
        level=Config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )
    uvicorn.run(app, host=Config.API_HOST, port=Config.API_PORT)


if __name__ == "__main__":
    main()
