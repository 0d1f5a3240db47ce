"""Test file that registers nothing."""
