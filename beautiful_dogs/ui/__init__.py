"""
View models exposing catalog and cart state to the rendering layer.
"""
