"""
Products bounded context, domain layer.

Holds the Product entity, its invariants, the typed failures raised
while handling products and the storage port.
"""
