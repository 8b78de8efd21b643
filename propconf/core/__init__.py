"""
Core building blocks shared by every propconf component.
"""
