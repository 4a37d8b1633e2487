"""Products bounded context, HTTP interface (router, schemas, dependencies)."""
