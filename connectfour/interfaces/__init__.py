"""
connectfour.interfaces - Presentation layers for Connect Four

This package contains the terminal front end that drives a GameEngine.
"""
