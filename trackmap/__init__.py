"""
annotates the per-base profile table of a genome with the features of the reference catalogs, placing
overlapping features on separate tracks
"""

__version__ = '1.0.0'
