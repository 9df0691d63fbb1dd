"""Upstream client and credential handling."""
