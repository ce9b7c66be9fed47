"""Batch sentiment analysis of text files with the Natural Language API."""
