"""
Wyrmfinder.

Search, filter and sort a fixed catalog of Wyrmspan dragon and cave cards.
"""
