# pylint: disable=c-extension-no-member
from dependency_injector import containers, providers

from wp_assets.dependency_injection.config import as_asset_config
from wp_assets.misc.utils import as_bool
from wp_assets.services.bundle_enqueuer import BundleEnqueuer
from wp_assets.services.dependency_resolver import DependencyResolver
from wp_assets.services.manifest_cache import ManifestCache
from wp_assets.services.manifest_service import ManifestReader
from wp_assets.services.template_service import TemplateService
from wp_assets.services.theme_asset_host import ThemeAssetHost


class Services(containers.DeclarativeContainer):
    config = providers.Configuration()

    asset_config = providers.Singleton(as_asset_config, config.theme)

    include_log_message_in_error_response = (
        config.app.include_log_message_in_error_response.as_(as_bool)
    )

    manifest_cache = providers.Singleton(
        ManifestCache,
        manifest_path=asset_config.provided.resolved_manifest_path,
        required=asset_config.provided.manifest_required,
    )

    manifest_reader = providers.Singleton(
        ManifestReader,
        manifest_cache=manifest_cache,
        base_url=asset_config.provided.public_url,
        base_dir=asset_config.provided.public_dir,
    )

    dependency_resolver = providers.Singleton(
        DependencyResolver,
        manifest_reader=manifest_reader,
        base_dir=asset_config.provided.public_dir,
    )

    theme_asset_host = providers.Factory(
        ThemeAssetHost,
        base_url=asset_config.provided.public_url,
        base_dir=asset_config.provided.public_dir,
    )

    bundle_enqueuer = providers.Factory(
        BundleEnqueuer,
        manifest_reader=manifest_reader,
        dependency_resolver=dependency_resolver,
        host=theme_asset_host,
        strategy=asset_config.provided.strategy,
        default_namespace=asset_config.provided.namespace,
    )

    template_service = providers.Singleton(
        TemplateService,
        jinja_template_directory=config.templates.jinja_path,
        manifest_reader=manifest_reader,
        host_factory=theme_asset_host.provider,
        bundle_enqueuer_factory=bundle_enqueuer.provider,
    )
