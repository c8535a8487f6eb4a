"""
Card Advisor - Credit Card Recommendation Service

A FastAPI-based microservice that matches a catalog of credit cards
against a user's declared financial profile and returns a ranked,
explained shortlist.
"""

__version__ = "0.1.0"
