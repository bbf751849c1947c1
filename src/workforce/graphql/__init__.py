"""
GraphQL API for Workforce
"""
