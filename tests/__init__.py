"""Tests for the wildfire cellular automaton."""
