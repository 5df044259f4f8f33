"""
Dependency injection container using dependency-injector.
Provides the health service/controller and the clock used to age bills.
"""

from datetime import date

from dependency_injector import containers, providers

from textile_billing.services.health_service import HealthService
from textile_billing.controllers.health_controller import HealthController


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""
    
    # Configuration
    config = providers.Configuration()
    
    # Current calendar day; override to age bills against a fixed date
    today = providers.Callable(date.today)
    
    # Services
    health_service = providers.Singleton(
        HealthService,
    )
    
    # Controllers
    health_controller = providers.Factory(
        HealthController,
        health_service=health_service,
    )


# Global container instance
_container: Container = None


def get_container() -> Container:
    """Get the global dependency injection container."""
    global _container
    if _container is None:
        from textile_billing.core.config import settings
        
        _container = Container()
        _container.config.from_dict({
            "database_url": settings.DATABASE_URL,
        })
    return _container
