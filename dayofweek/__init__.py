"""Day-of-week calculator for proleptic Gregorian dates"""

__version__ = "1.0.0"
