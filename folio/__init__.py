"""
FOLIO - Fill Out Layouts from an Itemized Overview

Binds a single structured profile document (personal info, skills, work history,
projects, summary statistics) to a pre-existing personal-site page.

Architecture:
- Loading Context: Profile document acquisition, parsing and validation
- Rendering Context: Section rendering, page surface binding and bar animation
"""

__version__ = "0.1.0"
