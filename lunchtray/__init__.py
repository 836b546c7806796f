"""Lunch Tray: a single-order meal picker for the terminal."""
