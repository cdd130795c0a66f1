"""Tests for type reference resolution and the type index."""

import pytest
from pydantic import ValidationError

from gql_clientgen.core.errors import UnknownTypeError
from gql_clientgen.core.resolver import base_kind, base_type_name, type_signature, unwrap
from gql_clientgen.core.schema import SchemaDefinition, TypeKind, TypeRef
from gql_clientgen.core.type_index import TypeIndex

STRING = TypeRef.named("String")


def deep(ref: TypeRef, depth: int) -> TypeRef:
    """Alternate LIST and NON_NULL wrappers ``depth`` times."""
    for i in range(depth):
        ref = TypeRef.list_of(ref) if i % 2 == 0 else TypeRef.non_null(ref)
    return ref


# =============================================================================
# Tests: type_signature
# =============================================================================


class TestTypeSignature:
    """Tests for type_signature."""

    def test_named(self):
        assert type_signature(STRING) == "String"

    def test_list_then_non_null(self):
        """Wrapping in LIST then NON_NULL yields [Base]!"""
        assert type_signature(TypeRef.non_null(TypeRef.list_of(STRING))) == "[String]!"

    def test_non_null_then_list(self):
        """Wrapping in NON_NULL then LIST yields [Base!]"""
        assert type_signature(TypeRef.list_of(TypeRef.non_null(STRING))) == "[String!]"

    def test_fully_wrapped(self):
        ref = TypeRef.non_null(TypeRef.list_of(TypeRef.non_null(STRING)))
        assert type_signature(ref) == "[String!]!"

    def test_nested_lists(self):
        ref = TypeRef.list_of(TypeRef.list_of(TypeRef.named("Int")))
        assert type_signature(ref) == "[[Int]]"

    def test_deeper_than_introspection_fragment(self):
        """No fixed bound on wrapper depth."""
        signature = type_signature(deep(STRING, 12))
        assert signature.count("[") == 6
        assert signature.count("!") == 6
        assert "String" in signature


# =============================================================================
# Tests: base_type_name / base_kind / unwrap
# =============================================================================


class TestBaseType:
    """Tests for base_type_name and base_kind."""

    def test_fully_wrapped_string(self):
        ref = TypeRef.non_null(TypeRef.list_of(TypeRef.non_null(STRING)))
        assert base_type_name(ref) == "String"
        assert base_kind(ref) is TypeKind.SCALAR

    @pytest.mark.parametrize("depth", [0, 1, 2, 5, 20])
    def test_invariant_under_nesting(self, depth):
        ref = deep(TypeRef.named("User", TypeKind.OBJECT), depth)
        assert base_type_name(ref) == "User"
        assert base_kind(ref) is TypeKind.OBJECT


class TestUnwrap:
    """Tests for unwrap."""

    def test_nullable_scalar(self):
        result = unwrap(STRING)
        assert result.name == "String"
        assert result.optional is True
        assert result.is_list is False

    def test_outermost_non_null_is_required(self):
        assert unwrap(TypeRef.non_null(STRING)).optional is False

    def test_inner_non_null_does_not_make_required(self):
        result = unwrap(TypeRef.list_of(TypeRef.non_null(STRING)))
        assert result.optional is True
        assert result.is_list is True

    def test_list_anywhere_in_chain(self):
        result = unwrap(TypeRef.non_null(TypeRef.list_of(TypeRef.non_null(STRING))))
        assert result.optional is False
        assert result.is_list is True


# =============================================================================
# Tests: TypeRef validation
# =============================================================================


class TestTypeRefValidation:
    """Wrapped only when kind is NON_NULL or LIST."""

    def test_wrapper_requires_of_type(self):
        with pytest.raises(ValidationError):
            TypeRef.model_validate({"kind": "LIST", "name": None, "ofType": None})

    def test_named_must_not_wrap(self):
        with pytest.raises(ValidationError):
            TypeRef.model_validate({"kind": "OBJECT", "name": "User", "ofType": {"kind": "SCALAR", "name": "ID"}})

    def test_named_requires_name(self):
        with pytest.raises(ValidationError):
            TypeRef.model_validate({"kind": "SCALAR", "name": None})

    def test_camel_case_aliases(self):
        ref = TypeRef.model_validate({
            "kind": "NON_NULL",
            "name": None,
            "ofType": {"kind": "SCALAR", "name": "ID", "ofType": None},
        })
        assert ref.of_type.name == "ID"


# =============================================================================
# Tests: TypeIndex
# =============================================================================


class TestTypeIndex:
    """Tests for TypeIndex."""

    def test_lookup(self, user_profile_index):
        assert user_profile_index["User"].kind is TypeKind.OBJECT
        assert "Profile" in user_profile_index
        assert "Missing" not in user_profile_index

    def test_unknown_type_raises(self, user_profile_index):
        with pytest.raises(UnknownTypeError) as exc_info:
            user_profile_index.get_type("Missing")
        assert exc_info.value.type_name == "Missing"

    def test_resolve_wrapped_ref(self, user_profile_index):
        ref = TypeRef.non_null(TypeRef.named("Profile", TypeKind.OBJECT))
        assert user_profile_index.resolve(ref).name == "Profile"

    def test_root_fields_in_declaration_order(self, user_profile_schema, user_profile_index):
        fields = user_profile_index.root_fields(user_profile_schema, "query")
        assert [f.name for f in fields] == ["user"]

    def test_missing_mutation_root(self, user_profile_schema, user_profile_index):
        assert user_profile_index.root_fields(user_profile_schema, "mutation") == []

    def test_len_and_iter(self, user_profile_schema):
        index = TypeIndex.from_schema(user_profile_schema)
        assert len(index) == len(user_profile_schema.types)
        assert set(index) == {t.name for t in user_profile_schema.types}


class TestSchemaDefinition:
    """Tests for payload envelopes."""

    def test_accepts_all_envelopes(self, user_profile_payload):
        inner = user_profile_payload["data"]
        for payload in (user_profile_payload, inner, inner["__schema"]):
            schema = SchemaDefinition.from_introspection(payload)
            assert schema.query_type.name == "Query"

    def test_null_members_become_empty_lists(self, user_profile_schema):
        user = next(t for t in user_profile_schema.types if t.name == "User")
        assert user.input_fields == []
        assert user.enum_values == []
