"""Tests for the jcard library."""
