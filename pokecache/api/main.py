"""
FastAPI application - Main entry point

    uvicorn pokecache.api.main:app --port 3000
"""

from dotenv import load_dotenv

load_dotenv()

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse

from pokecache.catalog.cache_manager import CacheManager
from pokecache.catalog.query import PokemonQuery, QueryEngine
from pokecache.catalog.refresh import CatalogClient, RefreshOrchestrator
from pokecache.database.snapshot_store import SnapshotStore
from pokecache.error_handler import ErrorHandler
from pokecache.integrations.clients.real_http.pokeapi import PokeApiClient
from pokecache.integrations.contracts.errors import PokemonNotFoundError, RemoteError
from pokecache.utils.config_loader import ServiceConfig, load_service_config

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

SERVICE_NAME = "Pokémon Cache API"
error_handler = ErrorHandler()


def create_app(
    config: Optional[ServiceConfig] = None,
    client: Optional[CatalogClient] = None,
    store: Any = None,
) -> FastAPI:
    """Build the app with its own cache; the snapshot is loaded here, once per process."""
    config = config or load_service_config()
    client = client or PokeApiClient(base_url=config.remote.base_url, timeout_ms=config.remote.timeout_ms)
    store = store or SnapshotStore(Path(config.cache.file))

    cache = CacheManager(store)
    cache.load()

    app = FastAPI(
        title=SERVICE_NAME,
        description="Caching proxy over the PokeAPI catalog with filtered queries",
        version="1.0.0",
    )
    app.state.config = config
    app.state.cache = cache
    app.state.query_engine = QueryEngine(cache, client, default_limit=config.query.default_limit)
    app.state.refresher = RefreshOrchestrator(cache, client)

    _register_exception_handlers(app)
    _register_routes(app)

    @app.on_event("startup")
    async def startup_event():
        """Log where the API listens and how much is cached"""
        logger.info("API is running at http://localhost:%s", config.server.port)
        logger.info("Loaded %d Pokémon from cache.", cache.count())

    return app


# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================

def get_cache(request: Request) -> CacheManager:
    return request.app.state.cache


def get_query_engine(request: Request) -> QueryEngine:
    return request.app.state.query_engine


def get_refresher(request: Request) -> RefreshOrchestrator:
    return request.app.state.refresher


def get_config(request: Request) -> ServiceConfig:
    return request.app.state.config


def _parse_limit(value: Optional[str]) -> Optional[int]:
    """Non-numeric limits fall back to the route default instead of failing the request."""
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


# ============================================================================
# ERROR HANDLING
# ============================================================================

def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(PokemonNotFoundError)
    async def not_found_handler(request: Request, exc: PokemonNotFoundError):
        return JSONResponse(status_code=404, content=error_handler.not_found())

    @app.exception_handler(RemoteError)
    async def remote_error_handler(request: Request, exc: RemoteError):
        logger.error("Catalog API failure on %s: %s", request.url.path, exc)
        return JSONResponse(status_code=500, content=error_handler.remote_failure(exc))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        return JSONResponse(
            status_code=500,
            content=error_handler.handle_exception(exc, context={"path": request.url.path}),
        )


# ============================================================================
# ENDPOINTS
# ============================================================================

def _register_routes(app: FastAPI) -> None:
    @app.get("/", tags=["Health"])
    async def root():
        """Health check endpoint."""
        return {"service": SERVICE_NAME, "status": "healthy", "version": app.version, "timestamp": datetime.now().isoformat()}

    @app.get("/health", tags=["Health"])
    async def health_check(cache: CacheManager = Depends(get_cache)):
        """Detailed health check (cache size and last save)."""
        return {
            "status": "healthy",
            "cache": {"cached": cache.count(), "fetched_at": cache.fetched_at, "store": cache.store.ping()},
            "timestamp": datetime.now().isoformat(),
        }

    @app.post("/refresh", tags=["Catalog"])
    async def refresh_cache(
        limit: Optional[str] = Query(None, description="Number of Pokémon to fetch from offset 0"),
        refresher: RefreshOrchestrator = Depends(get_refresher),
        config: ServiceConfig = Depends(get_config),
    ) -> Dict[str, Any]:
        requested = _parse_limit(limit)
        effective_limit = requested if requested and requested > 0 else config.refresh.default_limit
        outcome = await refresher.refresh(effective_limit)
        return {
            "success": True,
            "cached": outcome.cached,
            "refreshed": outcome.refreshed,
            "failed": outcome.failed,
        }

    @app.get("/pokemon", tags=["Catalog"])
    async def list_pokemon(
        name_contains: Optional[str] = Query(None),
        type_filter: Optional[str] = Query(None, alias="type", description="Comma-separated types, any may match"),
        min_weight: Optional[int] = Query(None),
        max_weight: Optional[int] = Query(None),
        limit: Optional[str] = Query(None),
        engine: QueryEngine = Depends(get_query_engine),
    ) -> Dict[str, Any]:
        query = PokemonQuery.from_params(
            name_contains=name_contains,
            type_filter=type_filter,
            min_weight=min_weight,
            max_weight=max_weight,
            limit=_parse_limit(limit),
        )
        results = engine.list_pokemon(query)
        return {"count": len(results), "results": [p.model_dump(mode="json") for p in results]}

    @app.get("/pokemon/{id_or_name}", tags=["Catalog"])
    async def get_pokemon(id_or_name: str, engine: QueryEngine = Depends(get_query_engine)) -> Dict[str, Any]:
        record = await engine.lookup(id_or_name)
        return record.model_dump(mode="json")


app = create_app()


def run() -> None:
    import uvicorn

    config: ServiceConfig = app.state.config
    uvicorn.run(app, host=config.server.host, port=config.server.port)


if __name__ == "__main__":
    run()
