"""
Helpers for composing parameterized SQL.
"""
