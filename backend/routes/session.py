from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

import config
import render
import tracker
from routes.deps import SessionContext, get_session_context

router = APIRouter(tags=["session"])


@router.get("/session", response_class=HTMLResponse)
@router.get("/session/{rest:path}", response_class=HTMLResponse)
async def establish_session(request: Request, session: SessionContext = Depends(get_session_context)):
    """
    Establishes (or refreshes) the session: counts this request, stamps
    the start time and reports the running total.
    """
    collection = tracker.load_entries(session)
    tracker.add(collection, request.url.path)
    tracker.save_entries(session, collection)
    session.set_string(config.START_TIME_KEY, render.long_time())

    return render.session_page(tracker.total_count(collection))
