from typing import Callable, Optional

from dependency_injector.wiring import inject, Provider
from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse

from wp_assets.dependency_injection.config import RouterConfig
from wp_assets.services.bundle_enqueuer import BundleEnqueuer
from wp_assets.services.theme_asset_host import ThemeAssetHost

entries_router = APIRouter()


@entries_router.get(RouterConfig.entries_endpoint + "/{entry:path}")
@inject
async def describe_entry(
    entry: str,
    namespace: Optional[str] = None,
    host_factory: Callable[[], ThemeAssetHost] = Depends(
        Provider["services.theme_asset_host"]
    ),
    bundle_enqueuer_factory: Callable[..., BundleEnqueuer] = Depends(
        Provider["services.bundle_enqueuer"]
    ),
) -> JSONResponse:
    host = host_factory()
    enqueuer = bundle_enqueuer_factory(host=host)
    enqueuer.enqueue_bundle(entry, namespace)

    return JSONResponse(
        content=jsonable_encoder(
            {
                "entry": entry,
                "strategy": enqueuer.strategy.value,
                "styles": host.styles(),
                "scripts": host.scripts(),
                "included_descriptors": enqueuer.included_descriptors,
            }
        )
    )
