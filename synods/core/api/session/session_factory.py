"""Session factory using Factory Pattern."""
import aiohttp

from ..config import SynoConfig


class SessionFactory:
    """Factory for creating HTTP sessions."""

    @staticmethod
    async def create_async_session(config: SynoConfig) -> aiohttp.ClientSession:
        """Creates an asynchronous HTTP session with a pooled connector."""
        connector = aiohttp.TCPConnector(**config.get_connector_kwargs())
        return aiohttp.ClientSession(
            connector=connector,
            **config.get_session_kwargs()
        )
