import pytest

from utils.http_client import HTTPClientManager


@pytest.mark.anyio
async def test_get_client_reuses_client_for_same_timeout():
    try:
        assert HTTPClientManager.get_client(30.0) is HTTPClientManager.get_client(30.0)
    finally:
        await HTTPClientManager.close_all()


@pytest.mark.anyio
async def test_get_client_honours_a_different_timeout():
    """Given two timeouts, get_client should return distinct clients configured with each."""
    try:
        short = HTTPClientManager.get_client(5.0)
        long = HTTPClientManager.get_client(90.0)

        assert short is not long
        assert short.timeout.read == 5.0
        assert long.timeout.read == 90.0
    finally:
        await HTTPClientManager.close_all()


@pytest.mark.anyio
async def test_close_all_closes_and_forgets_clients():
    client = HTTPClientManager.get_client(12.0)

    await HTTPClientManager.close_all()

    assert client.is_closed
    replacement = HTTPClientManager.get_client(12.0)
    assert replacement is not client
    await HTTPClientManager.close_all()
