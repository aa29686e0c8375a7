from craftblocks import AsyncCraftClient
from .env import CONFIG, LOG

CRAFT_CLIENT = AsyncCraftClient(CONFIG.craft_base_url, timeout=CONFIG.craft_timeout)


async def setup() -> None:
    LOG.info(f"Forwarding queries on {CONFIG.query_path} to {CRAFT_CLIENT.base_url}")


async def cleanup() -> None:
    await CRAFT_CLIENT.aclose()
