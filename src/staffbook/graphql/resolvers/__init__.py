"""Resolver package for the GraphQL schema.

Resolvers are plain async functions that take the service context explicitly;
the Strawberry query and mutation types pull that context out of the request
and convert the results into GraphQL types.
"""

# Intentionally empty; functions are defined in sibling modules.
