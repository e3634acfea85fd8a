"""
Common code for tests.
"""
import asyncio


async def delayed(value, delay=0.01):
    """
    Value available after `delay` seconds.
    """
    await asyncio.sleep(delay)
    return value


def run(coro):
    return asyncio.run(coro)
