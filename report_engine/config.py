import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


class Config:
    # --- Application Settings ---
    API_TITLE = os.getenv("REPORT_API_TITLE", "PDF Report Generator API")
    API_HOST = os.getenv("API_HOST", "0.0.0.0")
    API_PORT = int(os.getenv("API_PORT", "8000"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # --- Report Header ---
    # Relative paths resolve against the working directory at generation time
    LOGO_PATH = os.getenv("REPORT_LOGO_PATH", "assets/logo.png")
    COMPANY_NAME = os.getenv("REPORT_COMPANY_NAME", "Barracuda Networks")
    FALLBACK_VALUE = os.getenv("REPORT_FALLBACK_VALUE", "N/A")

    # --- Formatting ---
    GENERATED_DATE_FORMAT = os.getenv("REPORT_DATE_FORMAT", "%b %d, %Y")
    SHOW_PAGE_NUMBERS = os.getenv("REPORT_SHOW_PAGE_NUMBERS", "true").lower() in ("1", "true", "yes")
    FOOTER_RIGHT_TEXT = os.getenv("REPORT_FOOTER_RIGHT_TEXT") or None
