"""
Minimal Graphgate example.

Usage:
    uvicorn example.main:app --reload

    curl -X POST localhost:8000/graphql \
        -H 'Content-Type: application/json' \
        -d '[{"query": "{ hello }"}, {"query": "mutation { increment }"}]'
"""

from graphql import GraphQLField, GraphQLInt, GraphQLObjectType, GraphQLSchema, GraphQLString

from graphgate import Gateway, GraphQLOptions

counter = {"value": 0}


def increment(_root, _info):
    counter["value"] += 1
    return counter["value"]


schema = GraphQLSchema(
    query=GraphQLObjectType(
        "Query",
        {"hello": GraphQLField(GraphQLString, resolve=lambda _root, info: f"Hello {info.context['user']}")},
    ),
    mutation=GraphQLObjectType(
        "Mutation",
        {"increment": GraphQLField(GraphQLInt, resolve=increment)},
    ),
)


def options(request):
    return GraphQLOptions(schema=schema, context={"user": request.headers.get("x-user", "guest")})


gateway = Gateway(options)

app = gateway.app
