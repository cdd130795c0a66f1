"""Generate Python GraphQL clients from introspected schemas."""
