"""
Kiroween theme toolkit: palette/contrast utilities, background pattern generation,
asset validation and background stylesheet injection.
"""
