from dotenv import load_dotenv
load_dotenv()

import logging

from fastapi import FastAPI

import config
from routes import catchall, favicon, session, untracked

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="AppState Sample", version="0.1.0")

# Order matters: the catch-all must be registered last.
app.include_router(favicon.router)
app.include_router(untracked.router)
app.include_router(session.router)
app.include_router(catchall.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
