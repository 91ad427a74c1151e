"""Stockroom: products and their stock on hand."""
