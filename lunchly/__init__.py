"""Lunchly: customer and reservation data access for a restaurant."""
