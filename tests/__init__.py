"""Test suite for the magnetic charge trap core and its renderer."""
