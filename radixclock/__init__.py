"""
Radixclock: render durations in arbitrary mixed-radix time units.
"""
