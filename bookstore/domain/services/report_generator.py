"""HTML report rendering for the bookstore."""

from decimal import ROUND_HALF_UP, Decimal
from html import escape
from typing import Iterable, Optional

from ..entities.book import Book, join_authors

REPORT_HEADER = "<html><body><h1>Bookstore Report</h1><table border='1'>"
REPORT_FOOTER = "</table></body></html>"
COLUMNS = ("ISBN", "Title", "Authors", "Year", "Price", "Category", "Cover")
CENT = Decimal("0.01")


def format_currency(amount: Decimal) -> str:
    """Format a price as a dollar amount, e.g. ``$1,234.50`` or ``-$5.00``.

    Half cents round away from zero.
    """
    cents = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    sign = "-" if cents < 0 else ""
    return f"{sign}${abs(cents):,.2f}"


def _cell(value: Optional[str]) -> str:
    return f"<td>{escape(value or '', quote=False)}</td>"


class ReportGenerator:
    """Renders books as a single HTML table."""

    def generate_html_report(self, books: Iterable[Book]) -> str:
        """Generate an HTML report with one row per book, in input order.

        Args:
            books: The books to render.

        Returns:
            str: The HTML document.
        """
        parts = [REPORT_HEADER, "<tr>"]
        parts.extend(f"<th>{column}</th>" for column in COLUMNS)
        parts.append("</tr>")

        for book in books:
            parts.append("<tr>")
            parts.append(_cell(book.isbn))
            parts.append(_cell(book.title))
            parts.append(_cell(join_authors(book.authors)))
            parts.append(_cell(str(book.year)))
            parts.append(_cell(format_currency(book.price)))
            parts.append(_cell(book.category))
            parts.append(_cell(book.cover))
            parts.append("</tr>")

        parts.append(REPORT_FOOTER)
        return "".join(parts)
