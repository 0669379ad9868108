"""Streamlit play surface for Dice Duel."""
