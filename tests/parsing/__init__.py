"""Tests for the jcard parsing library."""
