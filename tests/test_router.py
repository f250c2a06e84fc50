import json

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_post_single_query(client: AsyncClient):
    response = await client.post("/graphql", json={"query": "{ hello }"})
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == {"data": {"hello": "Hello world"}}


@pytest.mark.asyncio
async def test_post_batch(client: AsyncClient):
    payload = [
        {"query": '{ slow(delay: 0.02, label: "a") }'},
        {"query": "mutation { increment }"},
        {"query": '{ slow(delay: 0, label: "c") }'},
    ]
    response = await client.post("/graphql", json=payload)
    assert response.status_code == 200
    data = response.json()
    assert data[0] == {"data": {"slow": "a"}}
    assert data[1] == {"data": {"increment": 1}}
    assert data[2] == {"data": {"slow": "c"}}


@pytest.mark.asyncio
async def test_get_query_with_string_variables(client: AsyncClient):
    params = {
        "query": "query Greet($name: String) { hello(name: $name) }",
        "variables": json.dumps({"name": "Eve"}),
        "operationName": "Greet",
    }
    response = await client.get("/graphql", params=params)
    assert response.status_code == 200
    assert response.json() == {"data": {"hello": "Hello Eve"}}


@pytest.mark.asyncio
async def test_get_without_params(client: AsyncClient):
    response = await client.get("/graphql")
    assert response.status_code == 400
    assert response.text == "GET query missing."


@pytest.mark.asyncio
async def test_get_mutation_is_rejected(client: AsyncClient):
    response = await client.get("/graphql", params={"query": "mutation { increment }"})
    assert response.status_code == 405
    assert response.headers["allow"] == "POST"


@pytest.mark.asyncio
async def test_unsupported_method(client: AsyncClient):
    response = await client.put("/graphql", json={"query": "{ hello }"})
    assert response.status_code == 405
    assert response.headers["allow"] == "GET, POST"


@pytest.mark.asyncio
async def test_post_empty_body(client: AsyncClient):
    response = await client.post("/graphql")
    assert response.status_code == 500
    assert "POST body missing" in response.text


@pytest.mark.asyncio
async def test_post_invalid_json(client: AsyncClient):
    response = await client.post(
        "/graphql", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.text == "POST body is not valid JSON."


@pytest.mark.asyncio
async def test_single_error_is_json_400(client: AsyncClient):
    response = await client.post("/graphql", json={"query": "{ nope }"})
    assert response.status_code == 400
    assert response.headers["content-type"] == "application/json"
    assert "data" not in response.json()
    assert "nope" in response.json()["errors"][0]["message"]


@pytest.mark.asyncio
async def test_null_data_after_execution_is_200(client: AsyncClient):
    response = await client.post("/graphql", json={"query": "{ requiredBoom }"})
    assert response.status_code == 200
    body = response.json()
    assert body["data"] is None
    assert body["errors"][0]["message"] == "boom"


@pytest.mark.asyncio
async def test_invalid_variables(client: AsyncClient):
    response = await client.post("/graphql", json={"query": "{ hello }", "variables": "{x"})
    assert response.status_code == 400
    assert response.text == "Variables are invalid JSON."
