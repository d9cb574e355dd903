"""Resolver package for the GraphQL schema.

Resolvers take the entity store from the GraphQL context, call into
``campus.services`` and convert store records into Strawberry types.
"""
