"""Tests for the uvicorn launcher."""

import asyncio
import logging

import run


class FakeServer:
    def __init__(self, config):
        self.config = config
        self.started = False

    async def serve(self):
        self.started = True
        await asyncio.sleep(0.1)


def test_announces_base_and_docs_url(monkeypatch, caplog):
    servers = []

    def make_server(config):
        server = FakeServer(config)
        servers.append(server)
        return server

    monkeypatch.setattr(run, "Server", make_server)
    with caplog.at_level(logging.INFO, logger="finance_api.run"):
        asyncio.run(run.run_api())

    assert servers[0].config.port == run.settings.port
    assert "Server berjalan di http://localhost:8080" in caplog.text
    assert "Swagger docs tersedia di http://localhost:8080/api-docs" in caplog.text
