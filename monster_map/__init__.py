"""
Monster Map - Jigsaw tile assembly and sea monster search.

Subpackages:
    - tiles: Grid model, orientations and tile parsing
    - solver: Assembly, stitching, pattern scan and strategies
"""
