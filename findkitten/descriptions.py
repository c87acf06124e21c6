"""
descriptions.py — Flavor text for the things lying around the grid.

Index 0 is reserved for the kitten; random objects draw from the rest.
Every entry fits on the status line (40 columns at the default size).
"""

GOAL_INDEX = 0

DESCRIPTIONS = [
    "Kitten!",
    "A paperclip bent into a question mark.",
    "Half a sandwich. Someone will be back.",
    "A potted cactus. It looks unimpressed.",
    "A floppy disk labelled 'DO NOT ERASE'.",
    "A lonely left sock.",
    "It's a bicycle bell. Ding.",
    "A pile of sand that was once a castle.",
    "An empty jar. It smells of pickles.",
    "A tiny cocktail umbrella.",
    "A map of this room. You are here.",
    "A cardboard box. No kitten inside.",
    "An unplugged toaster, humming quietly.",
    "A library book, nineteen years overdue.",
    "A chess knight, far from its board.",
    "A rubber duck wearing sunglasses.",
    "A bag of marbles. Most are lost.",
    "An envelope addressed to 'Occupant'.",
    "A compass that insists north is down.",
    "A jar of fireflies, blinking off-beat.",
    "It's a teapot, short and stout.",
    "A spool of red thread, tangled.",
    "A postcard from a town nobody knows.",
    "An abacus with one bead missing.",
    "A kite stuck in an invisible tree.",
    "A shoebox full of buttons.",
    "A tuning fork. It hums in B flat.",
    "A snow globe with no snow left.",
    "It's a very patient houseplant.",
    "A receipt for seven lemons.",
    "A wind-up mouse. Close, but no.",
    "A harmonica that plays one note.",
    "It's an hourglass, running upwards.",
    "A ball of yarn. Suspicious, but empty.",
    "A tin robot with a key in its back.",
    "A logbook. Every entry says 'foggy'.",
    "A fortune cookie: 'keep looking'.",
    "A stack of pancakes, stone cold.",
    "A magnifying glass.",
    "It's a doorknob without a door.",
    "A paper boat, ready to sail.",
]
