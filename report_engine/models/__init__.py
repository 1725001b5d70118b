from .document import (
    Alignment,
    TextRun,
    PageNumberField,
    PageCountField,
    ParagraphBlock,
    LogoBlock,
    ImageBlock,
    TableCell,
    TableRow,
    TableBlock,
    Frame,
    Header,
    Footer,
    PageSetup,
    Section,
    Document,
)
from .fields import HeaderFields, FooterFields

__all__ = [
    # Document model
    "Alignment",
    "TextRun",
    "PageNumberField",
    "PageCountField",
    "ParagraphBlock",
    "LogoBlock",
    "ImageBlock",
    "TableCell",
    "TableRow",
    "TableBlock",
    "Frame",
    "Header",
    "Footer",
    "PageSetup",
    "Section",
    "Document",
    # Inputs
    "HeaderFields",
    "FooterFields",
]
