"""
Core functionality for the YouTube to MP3 converter.

This package contains the input normalizer, the conversion API client,
and the state machine that drives the page.
"""
