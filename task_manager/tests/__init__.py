"""Tests for the task manager backend."""
