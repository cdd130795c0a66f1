"""Shared fixtures."""

import pytest

from builders import (
    arg,
    enum,
    enum_type,
    field,
    inp,
    input_type,
    introspection,
    list_of,
    named,
    non_null,
    obj,
    object_type,
    scalar_type,
)
from gql_clientgen.core.schema import SchemaDefinition
from gql_clientgen.core.type_index import TypeIndex


BLOG_SDL = '''
scalar DateTime

enum Status {
  DRAFT
  PUBLISHED
}

type Profile {
  bio: String
  website: String
}

type User {
  id: ID!
  name: String
  profile: Profile
  posts: [Post!]!
}

type Post {
  id: ID!
  title: String!
  status: Status
  createdAt: DateTime
  author: User
}

input AuthorInput {
  id: ID!
}

input PostInput {
  title: String!
  tags: [String!]
  authors: [AuthorInput!]
  status: Status = DRAFT
}

input FilterInput {
  status: Status
  limit: Int = 10
}

type Query {
  "Look up a single user."
  user(id: ID!): User
  users(filter: FilterInput!): [User!]!
  ping: String!
  search(term: String, first: Int!): [Post]
  me: User @deprecated(reason: "Use user(id:) instead.")
}

type Mutation {
  createPost(input: PostInput!): Post
  publish(id: ID!, at: DateTime): Boolean!
  user(id: ID!, name: String): User
}
'''


@pytest.fixture
def blog_sdl():
    return BLOG_SDL


@pytest.fixture
def user_profile_payload():
    """``user(id: ID!): User`` with User = {id, profile} and Profile = {bio}."""
    return introspection([
        object_type("Query", [
            field("user", obj("User"), args=[arg("id", non_null(named("ID")))]),
        ]),
        object_type("User", [
            field("id", non_null(named("ID"))),
            field("profile", obj("Profile")),
        ]),
        object_type("Profile", [
            field("bio", named("String")),
        ]),
    ])


@pytest.fixture
def filter_payload():
    """``users(filter: FilterInput!)`` where FilterInput = {status: Status, limit: Int}."""
    return introspection([
        object_type("Query", [
            field("users", non_null(list_of(non_null(obj("User")))), args=[
                arg("filter", non_null(inp("FilterInput"))),
            ]),
        ]),
        object_type("User", [
            field("id", non_null(named("ID"))),
            field("name", named("String")),
        ]),
        input_type("FilterInput", [
            arg("status", enum("Status")),
            arg("limit", named("Int")),
        ]),
        enum_type("Status", ["ACTIVE", "ARCHIVED"]),
        scalar_type("DateTime"),
    ])


@pytest.fixture
def user_profile_schema(user_profile_payload):
    return SchemaDefinition.from_introspection(user_profile_payload)


@pytest.fixture
def user_profile_index(user_profile_schema):
    return TypeIndex.from_schema(user_profile_schema)


@pytest.fixture
def filter_schema(filter_payload):
    return SchemaDefinition.from_introspection(filter_payload)


@pytest.fixture
def filter_index(filter_schema):
    return TypeIndex.from_schema(filter_schema)
