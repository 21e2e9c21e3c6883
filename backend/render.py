"""
HTML fragments returned by the handlers.

Every page is a bare <html><body> wrapper around a few lines of text.
"""

from datetime import datetime
from html import escape
from typing import Optional

from models.request_entry import RequestEntryCollection

UNTRACKED_LINK = "<a href=\"/untracked\">Visit untracked part of application</a>.<br>"


def long_time(now: Optional[datetime] = None) -> str:
    """Format a time as e.g. '3:04:05 PM'."""
    now = now or datetime.now()
    hour = now.hour % 12 or 12
    return f"{hour}:{now:%M:%S} {now:%p}"


def page(*lines: str) -> str:
    return "<html><body>" + "".join(lines) + "</body></html>"


def untracked_page(now: str) -> str:
    return page(
        f"Requested at: {now}<br>",
        "This part of the application isn't referencing Session...<br><a href=\"/\">Return</a>",
    )


def session_page(total: int) -> str:
    return page(
        f"Counting: You have made {total} requests to this application.<br><a href=\"/\">Return</a>",
    )


def not_established_page(now: str) -> str:
    return page(
        "Your session has not been established.<br>",
        f"{now}<br>",
        "<a href=\"/session\">Establish session</a>.<br>",
        UNTRACKED_LINK,
    )


def established_page(start_time: Optional[str], collection: RequestEntryCollection) -> str:
    lines = [f"Session Established At: {escape(start_time or '')}<br>"]
    for entry in collection.entries:
        lines.append(f"Request: {escape(entry.path)} was requested {entry.count} times.<br />")
    lines.append(
        "Your session was located, you've visited the site this many times: "
        f"{collection.total_count()}<br />"
    )
    lines.append(UNTRACKED_LINK)
    return page(*lines)
