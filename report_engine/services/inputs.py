"""
Input adaptation.

Turns raw uploads into engine inputs: CSV bytes into rows of strings and
metadata JSON into HeaderFields. Two metadata shapes are accepted:

- positional list: [title, inspector, date_range]
- keyed object: {"Title": ..., "ProductName": ..., "DateRange": ...}
"""

import csv
import io
import json
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from ..config import Config
from ..errors import MalformedTable, MetadataError
from ..models import FooterFields, HeaderFields

logger = logging.getLogger("ReportEngine.Inputs")

# Keys of the keyed metadata shape, in lookup order
TITLE_KEYS = ("Title",)
SUBJECT_KEYS = ("ProductName", "InspectorName")
DATE_RANGE_KEYS = ("DateRange",)


def parse_csv(content: Union[bytes, str], delimiter: str = ",") -> List[List[str]]:
    """
    Tokenize CSV content into rows of strings.

    The header row is kept as row 0. Blank lines are skipped and rows keep
    their own length (ragged rows are left for the layout to handle).

    Args:
        content: Raw CSV bytes (UTF-8, optional BOM) or text.
        delimiter: Field separator.

    Returns:
        List of rows.
    """
    try:
        if isinstance(content, bytes):
            text = content.decode("utf-8-sig")
        else:
            text = content.lstrip("\ufeff")

        reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)
        rows = [row for row in reader if row]
    except (UnicodeDecodeError, csv.Error) as e:
        raise MalformedTable(f"Could not read CSV data: {e}") from e

    logger.debug("Parsed CSV: %d rows", len(rows))
    return rows


def parse_metadata(raw: str) -> Union[List[Any], Dict[str, Any]]:
    """
    Decode the metadata JSON string.

    Raises:
        MetadataError: invalid JSON or neither a list nor an object.
    """
    try:
        metadata = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        raise MetadataError(f"Invalid JSON format for metadata: {e}") from e

    if not isinstance(metadata, (list, dict)):
        raise MetadataError("Failed to parse metadata: expected a JSON list or object.")
    return metadata


def resolve_header_fields(
    metadata: Union[List[Any], Dict[str, Any]],
    generated_on: Optional[datetime] = None,
    logo_path: Optional[str] = None,
    company_name: Optional[str] = None,
) -> HeaderFields:
    """
    Build HeaderFields from decoded metadata.

    Missing entries fall back to Config.FALLBACK_VALUE ("N/A").

    Args:
        metadata: Positional list or keyed object.
        generated_on: Generation timestamp (defaults to now).
        logo_path: Overrides Config.LOGO_PATH.
        company_name: Overrides Config.COMPANY_NAME.
    """
    generated_on = generated_on or datetime.now()

    if isinstance(metadata, list):
        title = _positional(metadata, 0)
        subject = _positional(metadata, 1)
        date_range = _positional(metadata, 2)
    elif isinstance(metadata, dict):
        title = _keyed(metadata, TITLE_KEYS)
        subject = _keyed(metadata, SUBJECT_KEYS)
        date_range = _keyed(metadata, DATE_RANGE_KEYS)
    else:
        raise MetadataError("Failed to parse metadata: expected a JSON list or object.")

    return HeaderFields(
        logo_path=logo_path or Config.LOGO_PATH,
        title=title,
        generated_date=format_generated_date(generated_on),
        company_name=company_name or Config.COMPANY_NAME,
        subject_name=subject,
        date_range=date_range,
    )


def default_footer_fields() -> FooterFields:
    return FooterFields(
        show_page_numbers=Config.SHOW_PAGE_NUMBERS,
        right_text=Config.FOOTER_RIGHT_TEXT,
    )


def format_generated_date(moment: datetime) -> str:
    """Format as "Jan 05, 2024"."""
    return moment.strftime(Config.GENERATED_DATE_FORMAT)


def _positional(values: List[Any], index: int) -> str:
    if index < len(values) and values[index] is not None:
        return str(values[index])
    return Config.FALLBACK_VALUE


def _keyed(values: Dict[str, Any], keys) -> str:
    for key in keys:
        value = values.get(key)
        if value is not None:
            return str(value)
    return Config.FALLBACK_VALUE
