"""Test support utilities for collectkit tests."""
