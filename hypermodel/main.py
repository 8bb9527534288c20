from __future__ import annotations

import logging
import os
import socket
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Path, Query
from fastapi.middleware.cors import CORSMiddleware

from hypermodel.config.settings import settings
from hypermodel.models.health import Health
from hypermodel.routers import (
    authors,
    books,
    products
)
from hypermodel.utils.error_handlers import register_error_handlers

port = int(os.environ.get("FASTAPIPORT", 8000))

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


app = FastAPI(
    title=settings.APP_TITLE,
    description="Hypermedia documents (HAL, Collection+JSON, UBER) built from one abstract model.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# -----------------------------------------------------------------------------
# Health endpoints
# -----------------------------------------------------------------------------

def make_health(echo: Optional[str], path_echo: Optional[str]=None) -> Health:
    return Health(
        status=200,
        status_message="OK",
        timestamp=datetime.now(timezone.utc).isoformat(),
        ip_address=socket.gethostbyname(socket.gethostname()),
        echo=echo,
        path_echo=path_echo
    )

@app.get("/health", response_model=Health)
def get_health_no_path(echo: str | None = Query(None, description="Optional echo string")):
    return make_health(echo=echo, path_echo=None)

@app.get("/health/{path_echo}", response_model=Health)
def get_health_with_path(
    path_echo: str = Path(..., description="Required echo in the URL path"),
    echo: str | None = Query(None, description="Optional echo string"),
):
    return make_health(echo=echo, path_echo=path_echo)

# -----------------------------------------------------------------------------
# Routers to hypermedia resources
# -----------------------------------------------------------------------------

app.include_router(router=authors.router)
app.include_router(router=books.router)
app.include_router(router=products.router)


# -----------------------------------------------------------------------------
# Root
# -----------------------------------------------------------------------------
@app.get("/")
def root():
    return {"message": "Hypermedia demo API. Send Accept: application/hal+json, "
                       "application/vnd.collection+json or application/vnd.amundsen-uber+json."}

# -----------------------------------------------------------------------------
# Entrypoint for `python -m hypermodel.main`
# -----------------------------------------------------------------------------
if __name__ == "__main__":
    import uvicorn

    uvicorn.run("hypermodel.main:app", host="0.0.0.0", port=port, reload=True)
