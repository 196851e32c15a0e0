"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O beyond pytest's tmp_path; prefer behavior-centric assertions.
- Keep tests small, fast, and deterministic.
"""
