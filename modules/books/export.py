"""Report downloads of the catalog listing."""

import csv
import io
from datetime import date

from openpyxl import Workbook

EXPORT_HEADER = ["Name", "Author", "ISBN", "Created at"]


def _rows(books):
    for book in books:
        yield [book.name, book.author, book.isbn, book.created_at.strftime("%d/%m/%Y")]


def export_filename(extension: str, today: date | None = None) -> str:
    return f"catalog_{(today or date.today()).isoformat()}.{extension}"


def books_to_csv(books) -> bytes:
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n", quoting=csv.QUOTE_ALL)
    writer.writerow(EXPORT_HEADER)
    writer.writerows(_rows(books))
    # BOM so spreadsheet apps pick UTF-8
    return ("\ufeff" + out.getvalue()).encode("utf-8")


def books_to_xlsx(books) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = "Books"
    ws.append(EXPORT_HEADER)
    for row in _rows(books):
        ws.append(row)

    out = io.BytesIO()
    wb.save(out)
    return out.getvalue()
