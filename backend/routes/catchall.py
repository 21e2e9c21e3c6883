import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

import config
import render
import tracker
from routes.deps import SessionContext, get_session_context

logger = logging.getLogger(__name__)

router = APIRouter(tags=["catchall"])


@router.get("/{full_path:path}", response_class=HTMLResponse)
async def catch_all(request: Request, session: SessionContext = Depends(get_session_context)):
    """
    Default handler. Without a tracked session it asks the visitor to
    establish one; otherwise it counts this request and lists every path
    seen in the session.
    """
    collection = tracker.load_entries(session)

    if tracker.total_count(collection) == 0:
        return render.not_established_page(render.long_time())

    tracker.add(collection, request.url.path)
    tracker.save_entries(session, collection)
    logger.debug("Session %s: %d requests", session.session_id, tracker.total_count(collection))

    return render.established_page(session.get_string(config.START_TIME_KEY), collection)
