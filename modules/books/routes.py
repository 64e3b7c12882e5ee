"""HTTP routes for the book catalog. Every view requires a live session."""

from flask import current_app, jsonify, make_response, request
from flask_login import login_required

from extensions import get_book_repository
from utils import load_json, no_cache

from . import bp
from .export import books_to_csv, books_to_xlsx, export_filename
from .schemas import BookCreate, BookUpdate, CatalogStats, serialize_book
from .stats import compute_stats

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@bp.route("", methods=["GET"])
@login_required
def list_books():
    books = get_book_repository().search(request.args.get("search"))
    return jsonify([serialize_book(b) for b in books])


@bp.route("", methods=["POST"])
@login_required
def create_book():
    data = load_json(BookCreate, "Invalid book data")
    book = get_book_repository().create(data)
    current_app.logger.info("Book %s created", book.id)
    return jsonify(serialize_book(book)), 201


@bp.route("/<int:book_id>", methods=["GET"])
@login_required
def get_book(book_id: int):
    return jsonify(serialize_book(get_book_repository().get(book_id)))


@bp.route("/<int:book_id>", methods=["PUT"])
@login_required
def update_book(book_id: int):
    data = load_json(BookUpdate, "Invalid book data")
    book = get_book_repository().update(book_id, data)
    current_app.logger.info("Book %s updated (%s)", book.id, ", ".join(sorted(data.model_fields_set)) or "touch")
    return jsonify(serialize_book(book))


@bp.route("/<int:book_id>", methods=["DELETE"])
@login_required
def delete_book(book_id: int):
    get_book_repository().delete(book_id)
    current_app.logger.info("Book %s deleted", book_id)
    return "", 204


@bp.route("/stats", methods=["GET"])
@login_required
def stats():
    summary = compute_stats(get_book_repository().list_all())
    payload = CatalogStats.model_validate(summary, from_attributes=True)
    return no_cache(jsonify(payload.model_dump(mode="json", by_alias=True)))


@bp.route("/export.csv", methods=["GET"])
@login_required
def export_csv():
    resp = make_response(books_to_csv(get_book_repository().list_all()))
    resp.headers["Content-Type"] = "text/csv; charset=utf-8"
    resp.headers["Content-Disposition"] = f"attachment; filename={export_filename('csv')}"
    return resp


@bp.route("/export.xlsx", methods=["GET"])
@login_required
def export_xlsx():
    resp = make_response(books_to_xlsx(get_book_repository().list_all()))
    resp.headers["Content-Type"] = XLSX_MIMETYPE
    resp.headers["Content-Disposition"] = f"attachment; filename={export_filename('xlsx')}"
    return resp
