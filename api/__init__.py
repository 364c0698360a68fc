"""api/ -- FastAPI application, HTTP models, and route modules.

api/ is the outermost layer: it imports from auth/, catalog/, and core/;
nothing imports from api/.
"""
