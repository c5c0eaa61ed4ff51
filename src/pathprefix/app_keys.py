"""Application keys for type-safe app configuration access."""

from aiohttp import web

from pathprefix.core.prefix import PathPrefix

prefix_key = web.AppKey("path_prefix", PathPrefix)
