"""Test configuration and fixtures."""

import os

import logfire

# Test defaults, set before any Settings() is created
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-key-for-jwt-signing-only")
# Cheapest bcrypt cost keeps registration fast in tests
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

logfire.configure(send_to_logfire=False, console=False)
