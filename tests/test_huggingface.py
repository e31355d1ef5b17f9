"""Tests for the Hugging Face provider against a local aiohttp server."""

import pytest
from aiohttp import web
from aiohttp import test_utils

from traycer_lite.llm.base import (
    AuthenticationError,
    LLMError,
    ModelNotFoundError,
    RateLimitError,
)
from traycer_lite.llm.huggingface import HuggingFaceProvider


MODEL = "org/model"


async def start_server(handler) -> test_utils.TestServer:
    app = web.Application()
    app.router.add_post(f"/models/{MODEL}", handler)
    server = test_utils.TestServer(app)
    await server.start_server()
    return server


def provider_for(server: test_utils.TestServer, api_key: str | None = "hf_test") -> HuggingFaceProvider:
    return HuggingFaceProvider(
        api_key=api_key,
        model=MODEL,
        base_url=str(server.make_url("/models")),
        timeout=5.0,
    )


class TestHuggingFaceProvider:
    def test_defaults(self):
        provider = HuggingFaceProvider(api_key="hf_x")
        assert provider.get_name() == "huggingface"
        assert provider.model == "HuggingFaceH4/zephyr-7b-beta"
        assert provider.endpoint == (
            "https://api-inference.huggingface.co/models/HuggingFaceH4/zephyr-7b-beta"
        )

    @pytest.mark.asyncio
    async def test_posts_inputs_with_bearer(self):
        seen = {}

        async def handler(request):
            seen["auth"] = request.headers.get("Authorization")
            seen["body"] = await request.json()
            return web.json_response([{"generated_text": "hello"}])

        server = await start_server(handler)
        try:
            data = await provider_for(server).generate_text("write code")
        finally:
            await server.close()

        assert data == [{"generated_text": "hello"}]
        assert seen["auth"] == "Bearer hf_test"
        assert seen["body"] == {"inputs": "write code"}

    @pytest.mark.asyncio
    @pytest.mark.parametrize("status,error_type", [
        (401, AuthenticationError),
        (403, AuthenticationError),
        (429, RateLimitError),
        (503, LLMError),
    ])
    async def test_status_errors(self, status, error_type):
        async def handler(request):
            return web.Response(status=status, text="nope")

        server = await start_server(handler)
        try:
            with pytest.raises(error_type) as exc_info:
                await provider_for(server).generate_text("p")
        finally:
            await server.close()

        assert exc_info.value.status_code == status
        assert exc_info.value.provider == "huggingface"

    @pytest.mark.asyncio
    async def test_unknown_model(self):
        async def handler(request):
            return web.json_response({})

        server = await start_server(handler)
        try:
            provider = HuggingFaceProvider(
                api_key="hf_test",
                model="missing/model",
                base_url=str(server.make_url("/models")),
            )
            with pytest.raises(ModelNotFoundError):
                await provider.generate_text("p")
        finally:
            await server.close()

    @pytest.mark.asyncio
    async def test_non_json_body(self):
        async def handler(request):
            return web.Response(text="<html>oops</html>", content_type="text/html")

        server = await start_server(handler)
        try:
            with pytest.raises(LLMError):
                await provider_for(server).generate_text("p")
        finally:
            await server.close()

    @pytest.mark.asyncio
    async def test_missing_key(self):
        provider = HuggingFaceProvider(api_key=None)
        with pytest.raises(AuthenticationError):
            await provider.generate_text("p")

    def test_rejects_unknown_options(self):
        with pytest.raises(TypeError):
            HuggingFaceProvider(api_key="hf_x", temperature=0.2)
