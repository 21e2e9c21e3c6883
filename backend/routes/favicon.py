from fastapi import APIRouter, Response

router = APIRouter(tags=["ignored"])


# Favicon requests are not counted and never touch the session.
@router.get("/favicon.ico", include_in_schema=False)
@router.get("/favicon.ico/{rest:path}", include_in_schema=False)
async def favicon():
    return Response(status_code=404)
