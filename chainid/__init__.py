"""Blockchain identifiers: a well-known chain name or a raw chain id.

See :py:mod:`chainid.chain`.
"""
