"""Coroutine bindings loaded through paramount.require()."""

import asyncio


async def fetch(query, limit):
    """
    Fetch rows for a query.

    @param {Object}  [query]        Query description
    @param {String}  [query.table]  Table name
    @param {Integer} [limit]        Maximum number of rows
    """
    await asyncio.sleep(0)
    return [query["table"]] * int(limit)
