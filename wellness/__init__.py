"""
Personal wellness tracker: habit counters, mood journal and hydration reminders.
"""
__version__ = "0.1.0"
