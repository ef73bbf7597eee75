"""
Export formats for a (possibly filtered) question set:
- report_renderer — paginated PDF report
- clipboard       — numbered plain text
"""
