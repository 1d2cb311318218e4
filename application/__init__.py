"""
Application Layer for the fitness journal core.

This package contains:
- ports/: Repository interfaces (what the use cases need from storage)
- use_cases/: Journal upsert/dedup, program progress, journal queries,
  program assignment
- exceptions: Errors raised by use cases and repository adapters
"""
