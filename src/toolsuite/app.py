import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, List

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, Field

from .config import configure_logging, get_config
from .tools.base import CategoryWithTools, PublicIndexEntry, PublicToolView
from .tools.dispatcher import ToolDispatcher, tool_dispatcher
from .tools.errors import ToolLogicMissing, ToolNotFound

load_dotenv()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if get_config().preload_tools:
        await app.state.dispatcher.preload()
    yield


# --- FastAPI App ---
api = FastAPI(title="ToolSuite", lifespan=lifespan)
api.state.dispatcher = tool_dispatcher


class RunToolRequest(BaseModel):
    args: List[Any] = Field(default_factory=list)
    kwargs: Dict[str, Any] = Field(default_factory=dict)


def _dispatcher() -> ToolDispatcher:
    return api.state.dispatcher


@api.get("/tools", response_model=List[PublicToolView])
async def list_tools_endpoint(include_hidden: bool = True):
    """
    Public view of every registered tool.
    """
    tools = _dispatcher().registry.list_public_tools()
    if not include_hidden:
        tools = [tool for tool in tools if not tool.is_hidden]
    return tools


@api.get("/tools/{slug}", response_model=PublicToolView)
async def get_tool_endpoint(slug: str):
    """
    Public view of a single tool.
    """
    descriptor = _dispatcher().registry.get(slug)
    if descriptor is None:
        raise HTTPException(status_code=404, detail=f"Tool not found: {slug}")
    return descriptor.to_public()


@api.get("/categories", response_model=List[CategoryWithTools])
async def categories_endpoint():
    """
    Every category with its visible tools.
    """
    return _dispatcher().registry.build_category_index()


@api.get("/tools-public.json", response_model=List[PublicIndexEntry])
async def public_index_endpoint():
    """
    Search index of visible tools, same shape as the exported file.
    """
    return _dispatcher().registry.build_public_index()


@api.post("/tools/{slug}/run")
async def run_tool_endpoint(slug: str, request: RunToolRequest):
    """
    Run a tool with the given arguments and return its result.
    """
    timeout = get_config().server.tool_timeout
    try:
        result = await asyncio.wait_for(
            _dispatcher().run_tool(slug, *request.args, **request.kwargs),
            timeout=timeout,
        )
    except ToolNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ToolLogicMissing as e:
        logger.error(f"Tool {slug} is misconfigured: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    except asyncio.TimeoutError:
        logger.warning(f"Tool {slug} timed out after {timeout}s")
        raise HTTPException(status_code=504, detail=f"Tool timed out: {slug}")
    except (ValueError, TypeError) as e:
        logger.info(f"Tool {slug} rejected input: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Tool {slug} failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    logger.info(f"Tool {slug} ran successfully")
    return {"data": jsonable_encoder(result)}


def main():
    """
    Main function to run the FastAPI application using uvicorn.
    """
    config = get_config()
    configure_logging(config)
    uvicorn.run(api, host=config.server.host, port=config.server.port)
