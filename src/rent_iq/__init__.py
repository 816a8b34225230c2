"""RentIQ: rental eligibility scoring, requirement extraction and pre-approval."""

__version__ = "0.1.0"
