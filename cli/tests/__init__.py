"""Tests for the revsim CLI."""
