"""Preference computation stages."""
