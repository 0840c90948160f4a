"""Functional tests.

Purpose
- Exercise user-visible flows end-to-end at the CLI boundary.

Guidelines
- Assert on what the user sees (exit codes, printed reports), not internals.
"""
