"""Monetary domain package.

This package contains the pre-decimal British coins and notes, the systems change
is made from, composite Price amounts (pounds, shillings, pence) and the Wallet tally.
"""
