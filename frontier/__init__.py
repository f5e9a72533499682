"""Frontier: a two-player territory game on a square grid."""
