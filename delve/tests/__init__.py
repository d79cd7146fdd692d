"""Tests for the Delve engine."""
