"""Retirement-savings calculators: state subsidy, early-start pension and compound growth."""

__version__ = "0.1.0"
