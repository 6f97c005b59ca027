"""Data models for Task API."""
