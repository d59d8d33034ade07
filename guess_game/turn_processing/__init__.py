"""Turn processing helpers.

Turns a raw line of player input into a number the game loop can judge.
"""
