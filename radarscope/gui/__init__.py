"""
pygame renderer for radarscope
"""
