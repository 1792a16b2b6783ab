"""
Use cases: one module per rundown operation family.

Each function takes a RundownService and returns a contract-aligned dict,
ready for JSON output by the CLI or any request-handling layer.
"""
