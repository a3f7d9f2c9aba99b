"""
Lineup Picker Package

A coed softball lineup tool that assigns a roster to field positions across every
inning and builds the batting order. Candidate schedules are scored by a weighted
penalty model (sitting fairness, position eligibility, skill placement and batting
order shape) and searched with simulated annealing.
"""

__version__ = "0.3.0"
