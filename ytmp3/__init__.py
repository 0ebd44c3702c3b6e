"""
YouTube to MP3 converter.

A single-page Streamlit app that turns a YouTube URL or video ID into an MP3
download link by calling a hosted conversion API.
"""

from ytmp3.config import config

__version__ = config.APP_VERSION
