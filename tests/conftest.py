import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from graphgate import Gateway, GraphQLOptions
from sample_schema import build_schema


@pytest.fixture
def schema():
    return build_schema()


@pytest.fixture
def base_context():
    return {"user": "alice"}


@pytest.fixture
def options(schema, base_context):
    return GraphQLOptions(schema=schema, context=base_context, debug=False)


# Client
@pytest_asyncio.fixture(scope="function")
async def client(options):
    gateway = Gateway(options)
    async with AsyncClient(
        transport=ASGITransport(app=gateway.app), base_url="http://test"
    ) as ac:
        yield ac
