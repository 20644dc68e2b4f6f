"""Marketplace admin console core."""
