import logging

from dependency_injector.wiring import inject, Provide
from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse

from wp_assets.dependency_injection.config import RouterConfig
from wp_assets.exceptions.asset_exceptions import AssetBaseException
from wp_assets.services.manifest_cache import ManifestCache
from wp_assets.services.manifest_service import ManifestReader

misc_router = APIRouter()

logger = logging.getLogger(__name__)


@misc_router.get(RouterConfig.health_endpoint)
@inject
async def health(
    manifest_cache: ManifestCache = Depends(Provide["services.manifest_cache"]),
    manifest_reader: ManifestReader = Depends(Provide["services.manifest_reader"]),
) -> JSONResponse:
    entrypoints = 0
    try:
        entrypoints = len(manifest_reader.get_entrypoints())
        manifest_healthy = True
    except AssetBaseException as exception:
        logger.exception(
            "Manifest could not be loaded. Attempted: %s",
            manifest_cache.manifest_path,
            exc_info=exception,
        )
        manifest_healthy = False

    response = {
        "healthy": manifest_healthy,
        "results": [
            {
                "healthy": manifest_healthy,
                "service": "manifest",
                "entrypoints": entrypoints,
            }
        ],
    }

    return JSONResponse(
        content=jsonable_encoder(response),
        status_code=200 if manifest_healthy else 500,
    )
