"""core/ -- Kernel shared by every other package: configuration and the error taxonomy.

Layer rule: core/ imports only stdlib + third-party libraries.
Everything else may import from core/; core/ imports from nothing in this repo.
"""
