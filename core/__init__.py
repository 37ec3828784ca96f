"""
Core building blocks shared by the handlers.
"""
