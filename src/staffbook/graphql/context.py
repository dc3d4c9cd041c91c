"""
Access to the service context from GraphQL resolvers
"""

from typing import TYPE_CHECKING

import strawberry

from ..logging import get_logger

if TYPE_CHECKING:
    from ..context import ServiceContext

logger = get_logger(__name__)


def get_services_from_info(info: strawberry.Info) -> "ServiceContext":
    """
    Extract the service context from a GraphQL info object.

    Raises RuntimeError when the application was started without one, which
    surfaces to the client as a GraphQL error.
    """
    services = info.context.get("services")
    if services is None:
        logger.error("Service context not found in GraphQL context")
        raise RuntimeError("Service context is not available")
    return services
