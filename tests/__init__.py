"""Tests for fxoanda."""
