"""
Test suite for bcd-codec

Contains:
- tests/unit/          : Unit tests for codec, formats and record fields
"""
