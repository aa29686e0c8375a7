from contextlib import asynccontextmanager
from uuid import uuid4
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from craftblocks import CraftError, Position
from .di import setup, cleanup, CRAFT_CLIENT, LOG, CONFIG
from .env import bound_logging_vars
from .schema.api import QueryRequest, QueryResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await setup()
    yield
    # Shutdown
    await cleanup()


app = FastAPI(lifespan=lifespan)


@app.exception_handler(StarletteHTTPException)
async def plain_text_http_error(request: Request, exc: StarletteHTTPException) -> Response:
    # routing errors (405, 404) are answered as plain text like the endpoint's own errors
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=getattr(exc, "headers", None)
    )


@app.post(CONFIG.query_path)
async def create_from_query(request: Request) -> Response:
    """
    Append the dictated ``query`` to the end of the document root.

    Errors are answered as plain text: 400 for a malformed body, 500 when the
    Craft API could not be reached or refused the change.
    """
    try:
        body = QueryRequest.model_validate_json(await request.body())
    except ValidationError as e:
        return PlainTextResponse(f"Invalid JSON: {e}", status_code=400)

    with bound_logging_vars(request_id=uuid4().hex):
        LOG.info(f"Received query: {body.query}")

        try:
            root = await CRAFT_CLIENT.blocks.fetch(max_depth=0)
        except CraftError as e:
            LOG.error(f"Error fetching root: {e}")
            return PlainTextResponse(f"Failed to fetch document: {e}", status_code=500)
        if not root.id:
            LOG.error("Root block has no id")
            return PlainTextResponse(
                "Failed to fetch document: root block has no id", status_code=500
            )

        try:
            inserted = await CRAFT_CLIENT.blocks.insert(
                Position.end(root.id), markdown=body.query
            )
        except CraftError as e:
            LOG.error(f"Error adding content: {e}")
            return PlainTextResponse(f"Failed to add content: {e}", status_code=500)
        if not inserted:
            LOG.error("Insert returned no blocks")
            return PlainTextResponse(
                "Failed to add content: no block was created", status_code=500
            )

        LOG.info(f"Added content to page {root.id} with block ID: {inserted[0].id}")

    response = QueryResponse(status="created", query=body.query)
    return JSONResponse(response.model_dump(), status_code=200)
