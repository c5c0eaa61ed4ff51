"""aiohttp integration.

Mounts route definitions under a path prefix and builds prefixed links
from request handlers.
"""

import logging
from collections.abc import Iterable

from aiohttp import web

from pathprefix.app_keys import prefix_key
from pathprefix.config import Config
from pathprefix.core.prefix import PathPrefix, coerce_prefix

logger = logging.getLogger(__name__)


def prefix_routes(
    prefix: PathPrefix | str,
    routes: Iterable[web.AbstractRouteDef],
) -> list[web.AbstractRouteDef]:
    """Rewrite route definitions to live under the prefix.

    Args:
        prefix: Mount point for the routes, a PathPrefix or plain text
        routes: Route and static definitions (e.g., a web.RouteTableDef)

    Returns:
        New definitions with prefixed paths, in the same order

    Raises:
        TypeError: If a definition type is not supported
    """
    prefix = coerce_prefix(prefix)
    result: list[web.AbstractRouteDef] = []
    for route in routes:
        if isinstance(route, web.RouteDef):
            path = prefix.join(route.path)
            result.append(web.RouteDef(route.method, path, route.handler, route.kwargs))
        elif isinstance(route, web.StaticDef):
            path = prefix.join(route.prefix)
            result.append(web.StaticDef(path, route.path, route.kwargs))
        else:
            raise TypeError(f"Unsupported route definition: {route!r}")
        logger.debug(f"Prefixed route {route!r} -> {path}")
    return result


def mount(
    app: web.Application,
    prefix: PathPrefix | str,
    routes: Iterable[web.AbstractRouteDef],
) -> None:
    """Register routes under the prefix and expose it to handlers.

    Args:
        app: Application to register routes on
        prefix: Mount point, stored under prefix_key for url_for()
        routes: Route definitions to register
    """
    prefix = coerce_prefix(prefix)
    app[prefix_key] = prefix
    app.router.add_routes(prefix_routes(prefix, routes))
    logger.debug(f"Mounted routes under {prefix.join()}")


def url_for(request: web.Request, *tokens: object) -> str:
    """Build an absolute path under the application's prefix."""
    return request.app[prefix_key].join(*tokens)


def create_join_routes() -> list[web.RouteDef]:
    return [
        web.get("/", get_prefix),
        web.get("/api/join/{path:.*}", get_join),
    ]


async def get_prefix(request: web.Request) -> web.Response:
    prefix = request.app[prefix_key]
    return web.json_response(
        {
            "prefix": str(prefix),
            "separator": prefix.separator,
            "root": url_for(request),
        }
    )


async def get_join(request: web.Request) -> web.Response:
    path = request.match_info["path"]
    prefix = request.app[prefix_key]
    return web.json_response(
        {
            "path": prefix.join(path),
            "relative": prefix.relative_join(path),
        }
    )


def create_app(config: Config) -> web.Application:
    """Create aiohttp application with routes mounted under the prefix.

    Args:
        config: Application configuration

    Returns:
        Configured aiohttp application
    """
    app = web.Application()
    mount(app, config.path_prefix(), create_join_routes())
    return app


def run_server(config: Config) -> None:
    """Run the server."""
    app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
