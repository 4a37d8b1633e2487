"""Products bounded context, application layer (use cases, DTOs)."""
