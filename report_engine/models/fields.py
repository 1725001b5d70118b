"""
Header and footer field values.

Resolved by the caller before generation starts; the engine never looks
anything up on its own apart from the logo file.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class HeaderFields:
    """
    Values shown in the two header frames of every page.

    subject_name is the second line of the right-hand frame. Depending on
    the metadata shape it carries an inspector name (positional list) or a
    product name (keyed object); the layout only treats it as text.
    """
    logo_path: str
    title: str
    generated_date: str
    company_name: str
    subject_name: str
    date_range: str


@dataclass(frozen=True)
class FooterFields:
    show_page_numbers: bool = True
    right_text: Optional[str] = None
