"""Relay, credential provisioning, and event dispatch."""
