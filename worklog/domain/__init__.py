"""Domain layer for Worklog.

Pure models and logic with no I/O:

- project, iteration, ticket, entry: the persisted entities
- timer: the two-state live timer
- report: filtering, grouping and totals over time entries
- shared: Result monad and domain event base
"""
