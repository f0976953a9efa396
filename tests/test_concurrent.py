"""Tests that the server handles many simultaneous requests correctly.

Requests are issued concurrently against the ASGI app with asyncio.gather,
so handlers interleave on the event loop the same way they do under uvicorn.
"""

import asyncio
import pytest


class TestConcurrentConnections:
    """Prove the registry stays consistent under simultaneous requests."""

    async def test_concurrent_shorten_requests(self, client):
        """Many concurrent POST /shorten with different URLs; all succeed and short_codes are unique."""
        concurrency = 30
        urls = [f"https://example.com/page_{i}" for i in range(concurrency)]
        tasks = [client.post("/shorten", json={"url": url}) for url in urls]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        short_codes = []
        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 200, f"Request {i}: status {r.status_code} body={r.text}"
            data = r.json()
            assert data["original_url"] == urls[i]
            short_codes.append(data["short_code"])

        assert len(short_codes) == len(set(short_codes)), "All short_codes must be unique under concurrency"

    async def test_concurrent_shorten_same_url(self, client, service):
        """Concurrent submissions of one new URL create exactly one entry."""
        concurrency = 25
        tasks = [
            client.post("/shorten", json={"url": "https://example.com/same"})
            for _ in range(concurrency)
        ]
        responses = await asyncio.gather(*tasks)

        data = [r.json() for r in responses]
        assert len({d["short_code"] for d in data}) == 1
        assert sum(1 for d in data if d["is_new"]) == 1
        assert service.registry.count() == 1

    async def test_concurrent_redirect_requests(self, client):
        """Create one short URL, then N concurrent redirects add exactly N clicks."""
        create_resp = await client.post(
            "/shorten",
            json={"url": "https://example.com/redirect-target"},
        )
        assert create_resp.status_code == 200
        short_code = create_resp.json()["short_code"]

        concurrency = 100
        tasks = [
            client.get(f"/{short_code}", follow_redirects=False)
            for _ in range(concurrency)
        ]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 302, f"Request {i}: status {r.status_code}"
            assert r.headers.get("location") == "https://example.com/redirect-target"

        stats = await client.get(f"/api/stats/{short_code}")
        assert stats.json()["clicks"] == concurrency

    async def test_concurrent_mixed_read_after_write(self, client):
        """Concurrent stats reads and redirects all succeed."""
        create_resp = await client.post(
            "/shorten",
            json={"url": "https://example.com/concurrent-target"},
        )
        short_code = create_resp.json()["short_code"]

        tasks = (
            [client.get(f"/api/stats/{short_code}") for _ in range(25)]
            + [client.get(f"/{short_code}", follow_redirects=False) for _ in range(25)]
        )
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code in (200, 302), f"Request {i}: status {r.status_code}"

        final = await client.get(f"/api/stats/{short_code}")
        assert final.json()["clicks"] == 25
