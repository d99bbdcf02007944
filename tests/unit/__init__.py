"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O beyond pytest's tmp_path; environment variables via monkeypatch.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
