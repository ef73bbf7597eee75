"""
HTTP routers:
  questions — POST /api/generate-questions
  documents — POST /api/extract-text
  export    — POST /api/export/pdf, POST /api/export/text
"""
