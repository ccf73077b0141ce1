"""
Hospital Management System Client

An asyncio client for the hospital booking service: doctor search by disease,
appointment booking, editing and cancellation against the remote API.
"""

__version__ = "1.0.0"
