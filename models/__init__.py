"""
models/ - Domain Models
=======================
Plain dataclasses mirroring the documents stored in the flights dataset.
Each model knows how to map itself to and from its raw document shape.
"""
