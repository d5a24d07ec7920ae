"""Application bootstrap.

The enclosing service calls ``create_app`` once at startup and opens a
request scope per unit of work:

    container = create_app()
    async with container() as request:
        tree = await request.get(CommentTree)
        await tree.create_comment(...)
    await container.close()
"""

from dishka import AsyncContainer

from agora.config import Settings
from agora.util.di.container import create_container
from agora.util.logging import setup_logging
from agora.util.observability import configure_logfire


def create_app(settings: Settings | None = None) -> AsyncContainer:
    """Configure logging and observability, then build the DI container.

    Args:
        settings: Settings used for logging/observability; loaded from the
            environment when omitted

    Returns:
        Production DI container
    """
    settings = settings or Settings()

    setup_logging(settings)
    configure_logfire(settings)

    return create_container()
