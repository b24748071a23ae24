"""
Rules subpackage for the Insight Engine.
Each module interprets one category of the metrics snapshot and returns an
advisory string, or None when the category has nothing to say.
"""
from . import sleep, hydration, mood, steps

# Evaluation order is also display order.
RULES = (sleep, hydration, mood, steps)
