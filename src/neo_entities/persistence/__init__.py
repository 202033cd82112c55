"""Persistence mapping: flat records and the factories that build them."""
