"""
Strawberry GraphQL schema, types and resolvers
"""
