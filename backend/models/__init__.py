from models.request_entry import RequestEntry, RequestEntryCollection
from models.session import Session

__all__ = ["RequestEntry", "RequestEntryCollection", "Session"]
