"""Tests for the falling sand simulation."""
