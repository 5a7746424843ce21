"""Streamlit UI for CommentRadar."""
