"""
Core types for the html_serializer package: document nodes, markup nodes and rules.
"""
