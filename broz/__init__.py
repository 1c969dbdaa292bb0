"""
Broz kink taxonomy and compatibility matching.

Subpackages:
- taxonomy: compiled-in catalog of categories and traits
- matching: compatibility relation, preference partition, overlap score
- profile:  selection caps for the profile editor and filters
"""

__version__ = "1.0.0"
