"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O beyond pytest's tmp_path; stub `click.prompt` at the boundary.
- Prefer behavior-centric assertions over implementation details.
"""
