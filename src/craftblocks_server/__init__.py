"""
Demo server: forwards dictated voice queries into a Craft document.
"""
