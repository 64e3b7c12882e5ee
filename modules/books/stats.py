"""Dashboard statistics, recomputed from the full listing on every call."""

from collections import Counter
from datetime import date
from typing import Sequence

TOP_AUTHORS = 5
RECENT_BOOKS = 5


def compute_stats(books: Sequence, today: date | None = None) -> dict:
    """Aggregate ``books``, which must already be ordered newest first.

    ``frequentAuthors`` breaks ties by the order in which an author first
    appears in ``books``; ``Counter`` keeps insertion order and ``sorted`` is
    stable, so that falls out of a plain sort on the count.
    """
    today = today or date.today()

    author_counts = Counter(book.author for book in books)
    frequent = sorted(author_counts.items(), key=lambda item: item[1], reverse=True)

    return {
        "totalBooks": len(books),
        "uniqueAuthors": len(author_counts),
        "todayBooks": sum(1 for book in books if book.created_at.date() == today),
        "uniqueISBNs": len({book.isbn for book in books}),
        "frequentAuthors": [
            {"author": author, "count": count} for author, count in frequent[:TOP_AUTHORS]
        ],
        "recentBooks": list(books[:RECENT_BOOKS]),
    }
