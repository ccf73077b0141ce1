"""
Test suite for the Hospital Management System client.

Runs the client against an in-memory fake of the booking service.
"""
import os

# Set environment for testing
os.environ["TESTING"] = "1"
