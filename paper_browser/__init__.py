"""
Paper Browser for Published Research-Paper Spreadsheets

This module provides tools for:
- Fetching a spreadsheet published as comma-separated values
- Parsing rows into typed paper records by header name
- Filtering papers by a free-text query over title, authors and journal
- Paginating filtered results for display
"""

__version__ = "0.1.0"
