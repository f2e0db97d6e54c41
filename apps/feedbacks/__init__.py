"""Participant feedback."""
