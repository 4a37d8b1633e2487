"""
Infrastructure adapters for the products bounded context.

Each adapter implements a domain port (ABC) and connects
to MongoDB through pymongo.
"""
