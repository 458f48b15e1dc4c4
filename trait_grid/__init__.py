"""
Trait Grid renders tables comparing the traits of several taxa, illustrated
with (optionally cropped) iNaturalist photos, as HTML ready for embedding in
iNaturalist comments and journal posts.
"""

__version__ = "1.0"
