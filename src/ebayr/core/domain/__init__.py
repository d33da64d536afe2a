"""Domain structures.

Why:
- `Record` is the read side of every response.
- The Pydantic models cover the small fixed shapes around it.
- Nothing here knows about HTTP or the command line.
"""
