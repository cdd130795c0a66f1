"""Unit tests for the method emitter."""

import pytest

from builders import arg, enum, field, inp, input_type, introspection, list_of, named, non_null, obj, object_type
from gql_clientgen.core.emitter import MethodEmitter, safe_identifier, to_snake_case
from gql_clientgen.core.errors import UnknownScalarError
from gql_clientgen.core.renderer import DocumentRenderer
from gql_clientgen.core.scalars import ScalarRegistry
from gql_clientgen.core.schema import SchemaDefinition
from gql_clientgen.core.type_index import TypeIndex


def load(payload):
    schema = SchemaDefinition.from_introspection(payload)
    return schema, TypeIndex.from_schema(schema)


def squash(text: str) -> str:
    return " ".join(text.split())


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def shop():
    return load(introspection(
        [
            object_type("Query", [
                field("product", obj("Product"), args=[arg("id", non_null(named("ID")))]),
                field("productCount", non_null(named("Int"))),
                field("products", list_of(obj("Product")), args=[
                    arg("category", enum("Category")),
                    arg("first", non_null(named("Int"))),
                    arg("after", named("String")),
                ]),
                field("legacyProduct", obj("Product"), deprecated=True),
            ]),
            object_type("Mutation", [
                field("product", obj("Product"), args=[arg("input", non_null(inp("ProductInput")))]),
                field("import", non_null(named("Boolean")), args=[
                    arg("from", non_null(named("String"))),
                    arg("class", named("String")),
                ]),
                field("close", named("Boolean")),
            ]),
            object_type("Product", [
                field("id", non_null(named("ID"))),
                field("price", named("Float")),
            ]),
            input_type("ProductInput", [arg("name", non_null(named("String")))]),
        ],
        mutation="Mutation",
    ))


# =============================================================================
# Tests: Helper Functions
# =============================================================================


class TestHelperFunctions:
    """Tests for to_snake_case and safe_identifier."""

    def test_to_snake_case_camel(self):
        assert to_snake_case("productCount") == "product_count"

    def test_to_snake_case_acronym(self):
        assert to_snake_case("getHTTPStatus") == "get_http_status"

    def test_to_snake_case_already_snake(self):
        assert to_snake_case("product_count") == "product_count"

    def test_safe_identifier_keyword(self):
        assert safe_identifier("from") == "from_"
        assert safe_identifier("self") == "self_"

    def test_safe_identifier_plain(self):
        assert safe_identifier("product") == "product"


# =============================================================================
# Tests: Operation documents
# =============================================================================


class TestOperations:
    """Tests for build_operation."""

    def test_user_example(self, user_profile_schema, user_profile_index):
        user = user_profile_index.root_fields(user_profile_schema, "query")[0]
        operation = MethodEmitter(user_profile_index).build_operation(user, "query")
        text = squash(DocumentRenderer().render(operation))

        assert "$id: ID!" in text
        assert "user(id: $id)" in text
        assert "user(id: $id) { id profile { bio } }" in text

    def test_scalar_return_has_no_selection(self, shop):
        schema, index = shop
        count = index["Query"].fields[1]
        operation = MethodEmitter(index).build_operation(count, "query")
        assert operation.selections is None
        assert operation.variables == []

    def test_variables_follow_declared_order(self, shop):
        schema, index = shop
        products = index["Query"].fields[2]
        operation = MethodEmitter(index).build_operation(products, "query")
        assert [(v.name, v.type_signature) for v in operation.variables] == [
            ("category", "Category"),
            ("first", "Int!"),
            ("after", "String"),
        ]


# =============================================================================
# Tests: Methods
# =============================================================================


class TestMethods:
    """Tests for emit and emit_all."""

    def test_queries_then_mutations(self, shop):
        schema, index = shop
        methods = MethodEmitter(index).emit_all(schema)
        assert [(m.field_name, m.operation_type) for m in methods] == [
            ("product", "query"),
            ("productCount", "query"),
            ("products", "query"),
            ("legacyProduct", "query"),
            ("product", "mutation"),
            ("import", "mutation"),
            ("close", "mutation"),
        ]

    def test_method_names_are_unique(self, shop):
        schema, index = shop
        names = [m.name for m in MethodEmitter(index).emit_all(schema)]
        assert names == [
            "product",
            "product_count",
            "products",
            "legacy_product",
            "product_mutation",
            "import_",
            "close_mutation",
        ]

    def test_skip_deprecated_root_fields(self, shop):
        schema, index = shop
        methods = MethodEmitter(index, skip_deprecated=True).emit_all(schema)
        assert "legacyProduct" not in [m.field_name for m in methods]

    def test_deprecation_reason(self, shop):
        schema, index = shop
        legacy = MethodEmitter(index).emit(index["Query"].fields[3], "query")
        assert legacy.deprecation_reason == "Deprecated."

    def test_parameters_keep_declared_order(self, shop):
        """A required argument after an optional one becomes keyword-only."""
        schema, index = shop
        products = MethodEmitter(index).emit(index["Query"].fields[2], "query")
        params = [(p.name, p.optional, p.keyword_only) for p in products.parameters]
        assert params == [
            ("category", True, False),
            ("first", False, True),
            ("after", True, True),
        ]

    def test_parameter_declarations(self, shop):
        schema, index = shop
        products = MethodEmitter(index).emit(index["Query"].fields[2], "query")
        assert [p.declaration for p in products.parameters] == [
            "category: Optional[str] = None",
            "first: int",
            "after: Optional[str] = None",
        ]

    def test_keyword_parameters_escaped(self, shop):
        schema, index = shop
        imported = MethodEmitter(index).emit(index["Mutation"].fields[1], "mutation")
        assert [(p.name, p.variable) for p in imported.parameters] == [
            ("from_", "from"),
            ("class_", "class"),
        ]

    def test_input_object_hint_and_docs(self, shop):
        schema, index = shop
        create = MethodEmitter(index).emit(index["Mutation"].fields[0], "mutation")
        [param] = create.parameters
        assert param.declaration == "input: dict[str, Any]"
        assert [d.path for d in create.docs] == ["input.name"]

    def test_return_hints(self, shop):
        schema, index = shop
        emitter = MethodEmitter(index)
        product, count, products = index["Query"].fields[:3]
        assert emitter.return_hint(product.type) == "Optional[dict[str, Any]]"
        assert emitter.return_hint(count.type) == "int"
        assert emitter.return_hint(products.type) == "Optional[list[Optional[dict[str, Any]]]]"

    def test_list_argument_hint(self):
        schema, index = load(introspection([
            object_type("Query", [
                field("nodes", non_null(named("Int")), args=[
                    arg("ids", non_null(list_of(non_null(named("ID"))))),
                    arg("names", list_of(named("String"))),
                ]),
            ]),
        ]))
        method = MethodEmitter(index).emit(index["Query"].fields[0], "query")
        assert [p.declaration for p in method.parameters] == [
            "ids: list[str]",
            "names: Optional[list[Optional[str]]] = None",
        ]

    def test_unregistered_scalar_argument_fails(self):
        schema, index = load(introspection([
            object_type("Query", [
                field("events", non_null(named("Int")), args=[arg("since", named("DateTime"))]),
            ]),
        ]))
        with pytest.raises(UnknownScalarError):
            MethodEmitter(index).emit_all(schema)

    def test_registered_scalar_argument(self):
        schema, index = load(introspection([
            object_type("Query", [
                field("events", non_null(named("Int")), args=[arg("since", named("DateTime"))]),
            ]),
        ]))
        scalars = ScalarRegistry()
        scalars.register("DateTime", "string", python_type="datetime")
        [method] = MethodEmitter(index, scalars).emit_all(schema)
        assert method.parameters[0].declaration == "since: Optional[datetime] = None"

    def test_unmapped_scalar_return_passes_through(self):
        schema, index = load(introspection([
            object_type("Query", [field("now", non_null(named("DateTime")))]),
        ]))
        [method] = MethodEmitter(index).emit_all(schema)
        assert method.return_hint == "Any"

    def test_suffixed_name_already_taken(self):
        """A suffixed name that clashes again gets a counter."""
        schema, index = load(introspection(
            [
                object_type("Query", [field("user", named("String"))]),
                object_type("Mutation", [
                    field("userMutation", named("String")),
                    field("user", named("String")),
                ]),
            ],
            mutation="Mutation",
        ))
        methods = MethodEmitter(index).emit_all(schema)

        assert [(m.name, m.field_name) for m in methods] == [
            ("user", "user"),
            ("user_mutation", "userMutation"),
            ("user_mutation2", "user"),
        ]
        assert len({m.constant_name for m in methods}) == 3
