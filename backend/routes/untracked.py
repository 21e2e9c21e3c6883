from fastapi import APIRouter
from fastapi.responses import HTMLResponse

import render

router = APIRouter(tags=["untracked"])


@router.get("/untracked", response_class=HTMLResponse)
@router.get("/untracked/{rest:path}", response_class=HTMLResponse)
async def untracked():
    """
    Static page that never reads or writes the session.
    No session dependency is declared, so no cookie is ever issued here.
    """
    return render.untracked_page(render.long_time())
