"""
Command Line Interface Package

Unified CLI for household finance operations.

Command Structure:
- household: Main entry point with utility commands (version, config)
- household salary: Salary history, pay schedules, and income totals
- household investments: Portfolio sync and reporting
"""
