"""Pydantic schemas for the periodization engine and its HTTP surface."""
