from dependency_injector import containers, providers

from pointapi.config import Settings
from pointapi.database.session import get_db
from pointapi.i18n import LangPropsService
from pointapi.services.point_query_service import PointQueryService


class ConfigModule(containers.DeclarativeContainer):
    """Application configuration."""

    config = providers.Singleton(Settings)


class RepositoryModule(containers.DeclarativeContainer):
    """Database session."""

    get_db = providers.Resource(get_db)


class ServiceModule(containers.DeclarativeContainer):
    """Service layer dependencies."""

    config = providers.DependenciesContainer()
    repositories = providers.DependenciesContainer()

    lang_service = providers.Singleton(
        LangPropsService, default_locale=config.config.provided.DEFAULT_LOCALE
    )
    point_query_service = providers.Factory(
        PointQueryService,
        db=repositories.get_db,
        settings=config.config,
        lang_service=lang_service,
    )


class Container(containers.DeclarativeContainer):
    """Application container."""

    wiring_config = containers.WiringConfiguration(
        modules=[
            "pointapi.routers.point_router",
        ],
    )

    config = providers.Container(ConfigModule)
    repositories = providers.Container(RepositoryModule)
    services = providers.Container(
        ServiceModule, config=config, repositories=repositories
    )
