"""Resolver package for the GraphQL schema.

Each module holds the query, mutation and relation-field resolvers for one
entity. Resolvers take the storage handle from the request context.
"""

# Intentionally empty; functions are defined in sibling modules.
