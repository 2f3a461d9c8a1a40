"""Introductory programming exercises: greeting, dictionary, wallet and summation."""
