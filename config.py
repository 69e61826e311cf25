"""
Game configuration and constants.
"""

# Color letters used in the track literal
COLOR_CODES = {
    "r": "red",
    "o": "orange",
    "y": "yellow",
    "g": "green",
    "b": "blue",
    "p": "purple",
}

# The track, start to finish. Tokens:
#   r o y g b p     plain colored square
#   *name           candy square
#   g>name          colored square that starts road `name`
#   p<name          colored square where road `name` ends
#   b!              pit
TRACK = """
p y b o g>rainbow r p *heart
y b o g r p y *cane
b o g r p y b o g r p y *man
b o g r p>mountain y b o g r p y b *drop
o g r p<mountain y b!
o g r p y b o g r p y b<rainbow
o g r p y b o g r p y b o g *brittle
r p y b o g r p y b o g r!
p y b o g r p y b *pop
o g r p y b o *float
g r p y b o g r p y b o g r p y b!
o g r p y b o g r p y b
"""

# Deck composition
CANDY_CARDS = ["float", "drop", "pop", "man", "heart", "brittle", "cane"]

# color -> (double cards, single cards)
COLOR_CARDS = {
    "red": (2, 8),
    "orange": (2, 7),
    "yellow": (2, 7),
    "green": (2, 8),
    "blue": (3, 7),
    "purple": (2, 7),
}

# Simulation defaults
DEFAULT_PLAYERS = 1
DEFAULT_GAMES = 10000
ALLOW_BACK_JUMPS = True

# Colors for plotting
COLOR_MAP = {
    "red": "#e41a1c",
    "orange": "#ff7f00",
    "yellow": "#ffd92f",
    "green": "#4daf4a",
    "blue": "#377eb8",
    "purple": "#984ea3",
    "candy": "#f781bf",
}

# UI Settings
DASHBOARD_SIMULATIONS = 2000
DASHBOARD_MAX_PLAYERS = 6
