"""
Wheel Power site content layer: async accessors for the Directus content service.
"""
