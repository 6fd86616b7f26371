"""
Automated players for the Blokus duel engine.
"""
