"""
Interview Question Generator

Resume document → plain text → LLM-generated interview questions →
filter / group / export (PDF report, clipboard text).
"""

__version__ = "1.0.0"
