"""Astronomical algorithms and the data tables that feed them.

The goal is to make all the algorithms as simple to use as possible: plain functions over
plain numbers, with thin value types layered on top in :mod:`.time`.
"""
