"""Shared fixtures: a local aiohttp server standing in for a JSON API."""

import asyncio
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer


async def items(request):
    request.app["seen"].append({
        "method": request.method,
        "path": request.path,
        "query": dict(request.query),
        "query_string": request.query_string,
        "raw_query": request.raw_path.partition("?")[2],
        "body": await request.read(),
    })
    return web.json_response({"count": 1})


async def slow(request):
    await asyncio.sleep(0.2)
    return web.json_response({"ok": True})


async def not_json(request):
    return web.Response(text="not json")


async def null_json(request):
    return web.Response(text="null", content_type="application/json")


async def scalar(request):
    return web.json_response(42)


async def missing(request):
    return web.json_response({"detail": "missing"}, status=404)


@pytest_asyncio.fixture
async def api():
    app = web.Application()
    app["seen"] = []
    app.router.add_route("*", "/items", items)
    app.router.add_get("/slow", slow)
    app.router.add_get("/text", not_json)
    app.router.add_get("/null", null_json)
    app.router.add_get("/scalar", scalar)
    app.router.add_get("/missing", missing)

    server = TestServer(app)
    await server.start_server()
    try:
        yield server
    finally:
        await server.close()
