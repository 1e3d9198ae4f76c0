"""
Screen-space transforms for the radar display
"""
