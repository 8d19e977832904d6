"""Testing – helpers for exercising requisite in downstream test-suites."""
