"""
HTTP client utilities with connection pooling.
Provides the shared httpx clients used for the search and LLM providers.
"""
import httpx


class HTTPClientManager:
    """Manages process-wide httpx clients, one per timeout setting."""

    _clients: dict[float, httpx.AsyncClient] = {}

    @classmethod
    def get_client(cls, timeout: float) -> httpx.AsyncClient:
        """
        Get or create the shared httpx client for outbound provider calls.

        Features:
        - Connection pooling (reuses TCP connections)
        - HTTP/2 where the provider supports it

        Args:
            timeout: Default timeout in seconds applied to every request

        Returns:
            Configured httpx.AsyncClient for that timeout
        """
        client = cls._clients.get(timeout)
        if client is None:
            limits = httpx.Limits(
                max_connections=20,
                max_keepalive_connections=10,
                keepalive_expiry=30.0
            )

            client = httpx.AsyncClient(
                timeout=timeout,
                limits=limits,
                http2=True
            )
            cls._clients[timeout] = client

        return client

    @classmethod
    async def close_all(cls) -> None:
        """
        Close all managed clients and clean up connections.
        """
        clients = list(cls._clients.values())
        cls._clients.clear()
        for client in clients:
            await client.aclose()
