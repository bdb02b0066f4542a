"""Unit tests for the HTTP classifier gateway (httpx.MockTransport, no network)."""

import json

import httpx
import pytest

from sentiment_layer.classifiers.exceptions import (
    ClassifierConnectionError,
    ClassifierHTTPError,
    ClassifierResponseError,
    ClassifierTimeoutError,
)
from sentiment_layer.classifiers.gateway import ClassifierGateway, parse_classification_payload

ENDPOINT = "https://models.test/primary"


def gateway_for(handler) -> ClassifierGateway:
    return ClassifierGateway(timeout=15.0, transport=httpx.MockTransport(handler))


class TestParsePayload:

    def test_first_element_is_used(self):
        data = [
            [{"label": "LABEL_2", "score": 0.8}, {"label": "LABEL_0", "score": 0.2}],
            [{"label": "LABEL_1", "score": 1.0}],
        ]
        parsed = parse_classification_payload(data)
        assert [(p.label, p.score) for p in parsed] == [("LABEL_2", 0.8), ("LABEL_0", 0.2)]

    def test_empty_inner_list_is_valid(self):
        assert parse_classification_payload([[]]) == []

    @pytest.mark.parametrize(
        "data",
        [
            {"error": "Model is loading"},
            [],
            ["positive"],
            [[{"label": "positive"}]],
            [[{"label": "positive", "score": "high"}]],
            None,
        ],
    )
    def test_malformed_shapes(self, data):
        with pytest.raises(ClassifierResponseError):
            parse_classification_payload(data)


class TestClassifierGateway:

    @pytest.mark.asyncio
    async def test_successful_request(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            seen["url"] = str(request.url)
            return httpx.Response(200, json=[[{"label": "positive", "score": 0.9}]])

        gateway = gateway_for(handler)
        result = await gateway.fetch(ENDPOINT, "NEGATION_bad", "hf_secret")
        await gateway.close()

        assert seen == {
            "auth": "Bearer hf_secret",
            "body": {"inputs": "NEGATION_bad"},
            "url": ENDPOINT,
        }
        assert result[0].label == "positive"
        assert result[0].score == 0.9

    @pytest.mark.asyncio
    async def test_non_2xx_raises_http_error(self):
        gateway = gateway_for(lambda request: httpx.Response(503, json={"error": "loading"}))
        with pytest.raises(ClassifierHTTPError) as exc_info:
            await gateway.fetch(ENDPOINT, "text", "tok")
        assert exc_info.value.status_code == 503

    @pytest.mark.asyncio
    async def test_unauthorized_raises_http_error(self):
        gateway = gateway_for(lambda request: httpx.Response(401))
        with pytest.raises(ClassifierHTTPError) as exc_info:
            await gateway.fetch(ENDPOINT, "text", "bad-token")
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_invalid_json_raises_response_error(self):
        gateway = gateway_for(lambda request: httpx.Response(200, text="<html>oops</html>"))
        with pytest.raises(ClassifierResponseError):
            await gateway.fetch(ENDPOINT, "text", "tok")

    @pytest.mark.asyncio
    async def test_wrong_shape_raises_response_error(self):
        gateway = gateway_for(lambda request: httpx.Response(200, json={"label": "positive"}))
        with pytest.raises(ClassifierResponseError):
            await gateway.fetch(ENDPOINT, "text", "tok")

    @pytest.mark.asyncio
    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(ClassifierTimeoutError) as exc_info:
            await gateway_for(handler).fetch(ENDPOINT, "text", "tok")
        assert exc_info.value.details["timeout"] == 15.0

    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ClassifierConnectionError) as exc_info:
            await gateway_for(handler).fetch(ENDPOINT, "text", "tok")
        assert not isinstance(exc_info.value, ClassifierTimeoutError)

    @pytest.mark.asyncio
    async def test_client_reused_and_recreated_after_close(self):
        gateway = gateway_for(lambda request: httpx.Response(200, json=[[]]))
        first = await gateway._get_client()
        assert await gateway._get_client() is first
        await gateway.close()
        assert first.is_closed
        assert await gateway._get_client() is not first
        await gateway.close()

    @pytest.mark.asyncio
    async def test_async_context_manager_closes(self):
        async with gateway_for(lambda request: httpx.Response(200, json=[[]])) as gateway:
            client = await gateway._get_client()
        assert client.is_closed
