"""
FOLIO - Formatted Output Layout for Itemized Occupational records

A deterministic resume rendering engine: takes a structured resume content tree and a
declarative design configuration and produces a laid-out, paginated document tree through
one of eight interchangeable layout templates.

Architecture:
- Styling Context: Preset tables, design configuration, concrete style resolution
- Content Context: Resume data model, rich-text extraction, date parsing and formatting
- Layout Context: Section visibility rules, the document tree and the eight template composers
- Rendering Context: Font registration and document assembly
"""

__version__ = "0.1.0"
