"""Test suite for wellcrafted.

Test structure:
- unit/: Unit tests for results, tagged errors, schemas, config and logging
"""
