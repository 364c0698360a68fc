"""catalog/ -- Categories, product listings, and the rules that connect them.

Layer rule: catalog/ imports from core/ only. It does NOT import from api/ or auth/.
"""
