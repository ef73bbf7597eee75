"""
Client-side review of a generated question set: filtering, grouping and the
per-user session that owns the current results.
"""
