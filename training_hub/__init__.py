"""Hyrox Training Hub — gym directory and training-plan catalogue."""
