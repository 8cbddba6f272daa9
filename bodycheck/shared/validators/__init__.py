"""Shared validators package.

Reusable checks that back the string rules and can also be used directly
in pydantic schemas.

Available validators:
- patterns.py: Email and dd.mm.yyyy date patterns, password character classes
- password.py: Password strength policy
"""
