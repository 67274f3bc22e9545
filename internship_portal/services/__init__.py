"""
Services module - one service per resource; all SQL lives here.
"""
