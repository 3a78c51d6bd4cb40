"""FastAPI REST surface for emlint."""
