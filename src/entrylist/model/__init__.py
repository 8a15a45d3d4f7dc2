"""
The MODEL layer contains pure data structures and list logic.
It has NO knowledge of the GUI (Qt).
"""
