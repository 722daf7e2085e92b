"""Test suite for the kintone records client."""
