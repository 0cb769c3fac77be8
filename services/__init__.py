"""
Service layer for the AWS Support API.

Holds the signed JSON transport and the Support operation table built on it.
"""
